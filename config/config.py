"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 词法分析参数
LEXER_CONFIG = {
    "scientific_notation": True,  # 允许 1e3 / 2.5E-4 形式的字面量
}

# 求值参数
EVALUATOR_CONFIG = {
    "compile_cache_size": 1000,  # FormulaEvaluator 编译结果缓存条数
    "log_failed_rows": 5,  # 批量求值时最多记录多少条失败行
}

# 命令行参数
CLI_CONFIG = {
    "log_level": "WARNING",
    "precision": None,  # 有效数字位数，None表示最短的精确表示(repr)
    "nan_is_failure": True,  # NaN结果视为失败（非零退出码）
    "log_format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(LEXER_CONFIG["scientific_notation"], bool), "scientific_notation 必须是布尔值"
    assert EVALUATOR_CONFIG["compile_cache_size"] > 0, "缓存大小必须为正"
    assert EVALUATOR_CONFIG["log_failed_rows"] >= 0, "log_failed_rows 不能为负"
    assert CLI_CONFIG["precision"] is None or 1 <= CLI_CONFIG["precision"] <= 17, "double 最多17位有效数字"
    assert isinstance(logging.getLevelName(CLI_CONFIG["log_level"]), int), "未知的日志级别"
    logger.debug("Configuration validated successfully!")
