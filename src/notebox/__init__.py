"""
Notebox Backend - personal note-taking API

Registration, login and per-user notes behind bearer token authentication.

Version: 1.0.0
"""

__version__ = "1.0.0"
