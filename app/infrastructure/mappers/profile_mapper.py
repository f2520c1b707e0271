"""
Profile mapper for converting between Band/GigProvider entities and database models.
"""

import logging
from typing import Any, List, Union

from app.domain.models.base import ValidationError
from app.domain.models.profile import AudioTrack, Profile, PROFILE_CLASSES
from app.domain.models.user import ProfileType
from app.infrastructure.db.models import BandModel, GigProviderModel, PROFILE_MODELS

logger = logging.getLogger(__name__)

ProfileModel = Union[BandModel, GigProviderModel]


class ProfileMapper:
    """Maps between profile domain entities and their database models."""

    def domain_to_model(self, profile: Profile) -> ProfileModel:
        """Convert a profile entity to a new database row."""
        model_class = PROFILE_MODELS[profile.profile_type]
        model = model_class(id=profile.id, user_id=profile.user_id)
        if profile.created_at is not None:
            model.created_at = profile.created_at
        self.update_model(model, profile)
        return model

    def update_model(self, model: ProfileModel, profile: Profile) -> None:
        """Copy writable profile fields and tracks onto a row."""
        for name in profile.UPDATABLE_FIELDS:
            setattr(model, name, getattr(profile, name))
        model.photos = list(profile.photos or [])
        model.audio_tracks = self.tracks_to_json(profile.audio_tracks)

    def model_to_domain(self, model: ProfileModel) -> Profile:
        """Convert a band or gig provider row to its entity."""
        profile_type = ProfileType.BAND if isinstance(model, BandModel) else ProfileType.GIG_PROVIDER
        profile_class = PROFILE_CLASSES[profile_type]

        values = {name: getattr(model, name) for name in profile_class.UPDATABLE_FIELDS}
        values["photos"] = list(model.photos or [])

        return profile_class(
            id=model.id,
            created_at=model.created_at,
            user_id=model.user_id,
            audio_tracks=self.tracks_from_json(model.audio_tracks),
            **values,
        )

    @staticmethod
    def tracks_to_json(tracks: List[AudioTrack]) -> List[dict]:
        return [track.to_dict() for track in tracks or []]

    @staticmethod
    def tracks_from_json(raw: Any) -> List[AudioTrack]:
        """Parse the JSON column; anything that is not a list reads as empty."""
        if not isinstance(raw, list):
            return []

        tracks = []
        for entry in raw:
            try:
                tracks.append(AudioTrack.from_dict(entry))
            except ValidationError as e:
                logger.warning(f"Skipping malformed stored audio track {entry!r}: {e.message}")
        return tracks
