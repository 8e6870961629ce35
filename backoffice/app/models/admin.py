"""
Admin database model.

Admins are operators of the back office. They are only created by bootstrap.
"""

from sqlalchemy import Column, Integer, String
from backoffice.app.db.session import Base


class Admin(Base):
    """Admin account used to log in to the back office."""
    __tablename__ = "admins"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True)
    password_hash = Column(String)
    display_name = Column(String)

    def __repr__(self):
        return f"<Admin(id={self.id}, username='{self.username}')>"
