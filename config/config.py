"""配置文件"""

# 求值参数
EVAL_CONFIG = {
    "quit_commands": ("quit", "exit"),  # 与原始输入完全相等时结束会话
}

# 交互界面参数
REPL_CONFIG = {
    "prompt": "rpn> ",
    "echo_prefix": "===> ",  # 回显输入行
    "result_prefix": "   = ",
    "error_prefix": "Unable to parse input: ",
    "use_color": True,
    "echo_input": True,
    "show_banner": True,
    "history_file": None,  # None 表示只在内存中保存历史
}

# 批处理参数
BATCH_CONFIG = {
    "expression_column": "expression",  # CSV 输入中的表达式列
    "output_path": "rpn_results.csv",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(EVAL_CONFIG["quit_commands"]) == {"quit", "exit"}, "退出命令必须是 quit 和 exit"
    assert all(cmd == cmd.strip() and cmd for cmd in EVAL_CONFIG["quit_commands"]), "退出命令不能含空白"
    assert REPL_CONFIG["prompt"], "提示符不能为空"
    assert BATCH_CONFIG["expression_column"], "表达式列名不能为空"
    assert BATCH_CONFIG["output_path"].endswith(".csv"), "批处理结果必须保存为CSV"
