"""核心流程。"""
