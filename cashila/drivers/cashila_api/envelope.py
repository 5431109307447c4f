# -*- coding: utf-8 -*-
# cashila/drivers/cashila_api/envelope.py
# Response envelope interpretation: {"result": ...} or {"error": {...}}.

from .errors import ApiError


def interpret(parsed):
    """
    将已解码的响应JSON解释为结果或错误

    Args:
        parsed: 已解码的JSON值

    Returns:
        result字段的值；没有信封时返回parsed本身

    Raises:
        ApiError: 响应中含有error字段（优先于result）
    """
    if not isinstance(parsed, dict):
        return parsed
    error = parsed.get('error')
    if error is not None and error is not False:
        raise ApiError(error)
    if 'result' in parsed:
        return parsed['result']
    return parsed
