# -*- coding: utf-8 -*-

SUCCESS = (0, 'success')
SERVER_ERROR = (-1, '服务器错误')

PAGE_NOT_FOUND = (404, '页面未找到')
NOT_METHOD_FOR_PATH = (405, '不支持的请求方法')
