"""Interactive desk calculator: tokenizer, recursive-descent evaluator and session loop"""
