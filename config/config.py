"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "decimal_min_digits": 1,  # 变量代入时至少保留1位小数，3 -> 3.0
}

# 命令行参数
CLI_CONFIG = {
    "log_level": "WARNING",
    "log_format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "errors": "raise",  # 批量求值的错误策略：raise / coerce
}

# 示例表达式
DEMO_EXPRESSIONS = [
    ("-10+x^2-5*x+(12/2)", {"x": 3}),
    ("-x + (y * -3) + 2^3", {"x": 10.0, "y": 2.0}),
    ("-x + (2 * -y)", {"x": 5, "y": 3}),
    ("x + -y + 2", {"x": 4, "y": 5}),
    ("10*5+4/2-1", {}),
    ("(x*3-5)/5", {"x": 10}),
    ("3*x+15/(3+2)", {"x": 10}),
]


def validate_config():
    """验证配置的合理性"""
    from engine.evaluator import ERROR_POLICIES

    assert CLI_CONFIG["errors"] in ERROR_POLICIES, f"Unknown error policy {CLI_CONFIG['errors']}"
    assert EVALUATOR_CONFIG["decimal_min_digits"] >= 1, "Substituted values need a decimal point"
