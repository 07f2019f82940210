"""
springbootchat: desktop chat client (login screen).
"""

__version__ = "0.1.0"
