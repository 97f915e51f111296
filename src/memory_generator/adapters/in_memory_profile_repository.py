"""Process-local profile repository."""

import threading
import time
from dataclasses import dataclass, field

from memory_generator.domain.profiles import Profile
from memory_generator.services.profiles import ProfileRepository


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """Keeps profiles in a dict keyed by a timestamp-derived id."""

    profiles: dict[str, Profile] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def create_profile(
        self,
        name: str,
        description: str,
        relationship: str,
        photos: list[str],
        created_at: str,
    ) -> Profile:
        """Store a new profile under the next free millisecond id."""
        with self._lock:
            candidate = int(time.time() * 1000)
            while str(candidate) in self.profiles:
                candidate += 1
            profile = Profile(
                id=str(candidate),
                name=name,
                description=description,
                relationship=relationship,
                photos=tuple(photos),
                created_at=created_at,
            )
            self.profiles[profile.id] = profile
            return profile

    def get_profile(self, profile_id: str) -> Profile | None:
        """Return a profile by id, if present."""
        return self.profiles.get(profile_id)

    def list_profiles(self) -> list[Profile]:
        """Return profiles in insertion order."""
        with self._lock:
            return list(self.profiles.values())

    def delete_profile(self, profile_id: str) -> Profile | None:
        """Remove and return a profile, if present."""
        with self._lock:
            return self.profiles.pop(profile_id, None)
