"""
AI Testcase Generator: turns a requirement description into test cases
via a hosted chat-completion model.
"""
from .main import app, create_app

__all__ = ["__version__", "app", "create_app"]
__version__ = "0.1.0"
