"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "max_expression_length": 4096,  # 输入字符数上限
    "max_tokens": 1024,  # token数量上限
    "strict_decimal": True,  # '1.2.3' 这类多小数点token视为非法
    "strict_arithmetic": True,  # 除零/NaN/溢出报错，而不是返回inf/nan
}

# 结果缓存
CACHE_CONFIG = {
    "cache_size": 1000,  # LRU缓存条目数，0表示不缓存
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["max_expression_length"] > 0, "max_expression_length必须为正数"
    assert EVALUATOR_CONFIG["max_tokens"] > 0, "max_tokens必须为正数"
    assert isinstance(EVALUATOR_CONFIG["strict_decimal"], bool), "strict_decimal必须为bool"
    assert isinstance(EVALUATOR_CONFIG["strict_arithmetic"], bool), "strict_arithmetic必须为bool"
    assert CACHE_CONFIG["cache_size"] >= 0, "cache_size不能为负数"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), \
        "未知的日志级别"
