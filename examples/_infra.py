from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field

from kungfu import Nothing, Option, Some


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Profile:
    user_id: int
    bio: str


def _empty_users() -> dict[int, User]:
    return {}


def _empty_profiles() -> dict[int, Profile]:
    return {}


@dataclass(slots=True)
class FakeDirectory:
    users: dict[int, User] = field(default_factory=_empty_users)
    profiles: dict[int, Profile] = field(default_factory=_empty_profiles)

    def find_user(self, user_id: int) -> Option[User]:
        user = self.users.get(user_id)
        return Nothing() if user is None else Some(user)

    def find_profile(self, user_id: int) -> Option[Profile]:
        profile = self.profiles.get(user_id)
        return Nothing() if profile is None else Some(profile)


def seeded_directory() -> FakeDirectory:
    directory = FakeDirectory()
    directory.users[1] = User(id=1, name="ada")
    directory.users[2] = User(id=2, name="grace")
    directory.profiles[1] = Profile(user_id=1, bio="analytical engines")
    directory.profiles[3] = Profile(user_id=3, bio="orphaned profile")
    return directory


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())


def or_default[T](option: Option[T], default: T) -> T:
    return option.unwrap() if isinstance(option, Some) else default
