"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from datetime import datetime

from sqlalchemy import (
    Column, String, DateTime, Text, Float, ForeignKey, JSON, Enum as SQLEnum, Index
)
from sqlalchemy.orm import relationship

from app.domain.models.base import new_id
from app.domain.models.user import ProfileType
from .database import Base


profile_type_enum = SQLEnum(
    ProfileType,
    name="profile_type",
    values_callable=lambda enum: [member.value for member in enum],
)


class UserModel(Base):
    """User table - one row per external identity"""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=new_id)
    external_auth_id = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255))
    image_url = Column(String(1000))
    email = Column(String(255), nullable=False, default="")
    profile_type = Column(profile_type_enum, nullable=True)

    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    band = relationship("BandModel", back_populates="user", uselist=False)
    gig_provider = relationship("GigProviderModel", back_populates="user", uselist=False)


class ProfileColumnsMixin:
    """Columns shared by bands and gig providers"""

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255))
    image_url = Column(String(1000))
    header_image = Column(String(1000))
    location = Column(String(255))
    latitude = Column(Float)
    longitude = Column(Float)
    description = Column(Text)
    website = Column(String(500))
    email = Column(String(255))
    phone_number = Column(String(50))
    facebook_url = Column(String(500))
    instagram_url = Column(String(500))

    # Ordered lists stored as JSON
    photos = Column(JSON, default=list)
    audio_tracks = Column(JSON, default=list)

    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)


class BandModel(ProfileColumnsMixin, Base):
    """Band table"""
    __tablename__ = 'bands'

    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)
    genre = Column(String(255))
    video_url = Column(String(500))
    band_members = Column(JSON)

    user = relationship("UserModel", back_populates="band")

    __table_args__ = (
        Index('ix_bands_created_at', 'created_at'),
    )


class GigProviderModel(ProfileColumnsMixin, Base):
    """Gig provider table"""
    __tablename__ = 'gig_providers'

    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)
    services = Column(Text)

    user = relationship("UserModel", back_populates="gig_provider")

    __table_args__ = (
        Index('ix_gig_providers_created_at', 'created_at'),
    )


class SharedProfileModel(Base):
    """Shared profile table - directed share edges between users"""
    __tablename__ = 'shared_profiles'

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    shared_by = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    profile_type = Column(profile_type_enum, nullable=False)
    share_message = Column(Text)
    share_date = Column(DateTime(timezone=True), default=datetime.utcnow)

    user = relationship("UserModel", foreign_keys=[user_id])

    __table_args__ = (
        Index('ix_shared_profiles_shared_by_date', 'shared_by', 'share_date'),
    )


PROFILE_MODELS = {
    ProfileType.BAND: BandModel,
    ProfileType.GIG_PROVIDER: GigProviderModel,
}
