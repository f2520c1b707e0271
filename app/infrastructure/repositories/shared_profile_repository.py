"""
Shared profile repository implementation using SQLAlchemy.
"""

from typing import List, Tuple
from sqlalchemy.orm import Session, selectinload

from app.domain.models.base import new_id
from app.domain.models.shared_profile import SharedProfile
from app.domain.models.user import ProfileType
from app.domain.repositories.shared_profile_repository import SharedProfileRepository
from app.infrastructure.db.models import SharedProfileModel, UserModel
from app.infrastructure.mappers.shared_profile_mapper import SharedProfileMapper
from app.infrastructure.pagination import offset_paginator


class SQLAlchemySharedProfileRepository(SharedProfileRepository):
    """SQLAlchemy implementation of shared profile repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = SharedProfileMapper()

    def save(self, shared_profile: SharedProfile) -> SharedProfile:
        """Insert a share edge. Duplicate edges are allowed."""
        shared_profile.id = shared_profile.id or new_id()
        model = self.mapper.domain_to_model(shared_profile)
        self.session.add(model)
        self.session.flush()

        shared_profile.share_date = model.share_date
        return shared_profile

    def find_for_recipient(self, recipient_id: str, sharer_type: ProfileType,
                           page: int = 1, limit: int = 9) -> Tuple[List[SharedProfile], int]:
        """Get edges shared with a recipient by users of the given kind."""
        base_query = self.session.query(SharedProfileModel).join(
            UserModel, SharedProfileModel.user_id == UserModel.id
        ).filter(
            SharedProfileModel.shared_by == recipient_id,
            SharedProfileModel.user_id != recipient_id,
            UserModel.profile_type == sharer_type,
        )

        ordered = base_query.options(
            selectinload(SharedProfileModel.user).selectinload(UserModel.band),
            selectinload(SharedProfileModel.user).selectinload(UserModel.gig_provider),
        ).order_by(SharedProfileModel.share_date.desc(), SharedProfileModel.id.desc())

        models, metadata = offset_paginator.paginate(
            ordered, page, limit, count_query=base_query
        )
        shared = [self.mapper.model_to_domain(model, include_sharer=True) for model in models]
        return shared, metadata.total_items

    def delete_for_recipient(self, shared_profile_id: str, recipient_id: str) -> int:
        """Delete an edge when the recipient matches; returns deleted row count."""
        return self.session.query(SharedProfileModel).filter(
            SharedProfileModel.id == shared_profile_id,
            SharedProfileModel.shared_by == recipient_id,
        ).delete(synchronize_session=False)
