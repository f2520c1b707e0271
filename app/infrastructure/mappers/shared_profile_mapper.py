"""
Shared profile mapper for converting between domain entities and database models.
"""

from app.domain.models.shared_profile import SharedProfile
from app.domain.models.user import ProfileType
from app.infrastructure.db.models import SharedProfileModel
from app.infrastructure.mappers.user_mapper import UserMapper
from app.infrastructure.mappers.profile_mapper import ProfileMapper


class SharedProfileMapper:
    """Maps between SharedProfile domain entity and SharedProfileModel database model."""

    def __init__(self):
        self.user_mapper = UserMapper()
        self.profile_mapper = ProfileMapper()

    def domain_to_model(self, shared_profile: SharedProfile) -> SharedProfileModel:
        """Convert SharedProfile domain entity to SharedProfileModel."""
        return SharedProfileModel(
            id=shared_profile.id,
            user_id=shared_profile.user_id,
            shared_by=shared_profile.shared_by,
            profile_type=shared_profile.profile_type,
            share_message=shared_profile.share_message,
            share_date=shared_profile.share_date,
        )

    def model_to_domain(self, model: SharedProfileModel, include_sharer: bool = False) -> SharedProfile:
        """
        Convert SharedProfileModel to SharedProfile domain entity.
        With include_sharer the sharer's user row and matching profile are attached.
        """
        shared_profile = SharedProfile(
            id=model.id,
            user_id=model.user_id,
            shared_by=model.shared_by,
            profile_type=model.profile_type,
            share_message=model.share_message,
            share_date=model.share_date,
        )

        if include_sharer and model.user is not None:
            shared_profile.sharer = self.user_mapper.model_to_domain(model.user)
            if model.user.profile_type == ProfileType.GIG_PROVIDER:
                profile_model = model.user.gig_provider
            else:
                profile_model = model.user.band
            if profile_model is not None:
                shared_profile.sharer_profile = self.profile_mapper.model_to_domain(profile_model)

        return shared_profile
