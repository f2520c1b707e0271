"""
Band and gig provider repository implementation using SQLAlchemy.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.domain.models.base import EntityNotFoundError, new_id
from app.domain.models.profile import Profile, AudioTrack, PROFILE_CLASSES
from app.domain.models.user import ProfileType
from app.domain.repositories.profile_repository import ProfileRepository
from app.infrastructure.db.models import PROFILE_MODELS
from app.infrastructure.mappers.profile_mapper import ProfileMapper
from app.infrastructure.pagination import PaginationHelper, offset_paginator


class SQLAlchemyProfileRepository(ProfileRepository):
    """SQLAlchemy implementation of the profile repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ProfileMapper()

    def save(self, profile: Profile) -> Profile:
        """Upsert a profile keyed on user_id."""
        model_class = PROFILE_MODELS[profile.profile_type]
        model = self.session.query(model_class).filter_by(user_id=profile.user_id).first()

        if model is None:
            profile.id = profile.id or new_id()
            model = self.mapper.domain_to_model(profile)
            self.session.add(model)
        else:
            profile.id = model.id
            self.mapper.update_model(model, profile)

        self.session.flush()
        return self.mapper.model_to_domain(model)

    def find_by_user_id(self, profile_type: ProfileType, user_id: str) -> Optional[Profile]:
        """Get the profile of a kind owned by a user."""
        model_class = PROFILE_MODELS[profile_type]
        model = self.session.query(model_class).filter_by(user_id=user_id).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def update_audio_tracks(self, profile_type: ProfileType, profile_id: str,
                            tracks: List[AudioTrack]) -> Profile:
        """Replace the stored track list with one UPDATE statement."""
        model_class = PROFILE_MODELS[profile_type]
        updated = self.session.query(model_class).filter_by(id=profile_id).update(
            {"audio_tracks": self.mapper.tracks_to_json(tracks)},
            synchronize_session=False
        )
        if not updated:
            raise EntityNotFoundError(profile_type.value, profile_id)

        self.session.flush()
        model = self.session.query(model_class).filter_by(id=profile_id).first()
        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def search(self, profile_type: ProfileType, query: Optional[str] = None,
               page: int = 1, limit: int = 9) -> Tuple[List[Profile], int]:
        """List profiles newest first, filtered by a case-insensitive substring."""
        model_class = PROFILE_MODELS[profile_type]
        search_fields = PROFILE_CLASSES[profile_type].SEARCH_FIELDS

        base_query = PaginationHelper.apply_search(
            self.session.query(model_class), model_class, query, search_fields
        )
        ordered = base_query.order_by(model_class.created_at.desc(), model_class.id.desc())

        models, metadata = offset_paginator.paginate(
            ordered, page, limit, count_query=base_query
        )
        return [self.mapper.model_to_domain(model) for model in models], metadata.total_items

