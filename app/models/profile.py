from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.db.database import Base
from app.models.user import generate_id


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, index=True, nullable=False)
    company = Column(String, nullable=True)
    website = Column(String, nullable=True)
    location = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    status = Column(String, nullable=False)
    githubusername = Column(String, nullable=True)

    # Document-style columns; lists are replaced, never mutated in place
    skills = Column(JSON, nullable=False, default=list)
    social = Column(JSON, nullable=False, default=dict)
    experience = Column(JSON, nullable=False, default=list)  # newest first
    education = Column(JSON, nullable=False, default=list)  # newest first

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="profile", lazy="joined")
