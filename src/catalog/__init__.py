"""Library catalog REST service.

People and the books they own, stored through SQLModel and served with
FastAPI.
"""

__version__ = "0.1.0"
