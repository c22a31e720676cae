from revql.logger import get_logger

__author__ = """revql developers"""
__version__ = "0.1.0"

log = get_logger("revql")
