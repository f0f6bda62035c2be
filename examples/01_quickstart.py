from __future__ import annotations

from _infra import banner, or_default, run, seeded_directory

import optpair


async def main() -> None:
    banner("01_quickstart: of + reduce family, no if/else cascade")

    directory = seeded_directory()

    for user_id in (1, 2, 3, 4):
        pair = optpair.of(directory.find_user(user_id), directory.find_profile(user_id))

        summary = (
            or_default(pair.reduce(lambda user, profile: f"{user.name}: {profile.bio}"), None)
            or or_default(pair.reduce_if_only_left_present(lambda user: f"{user.name}: (no profile)"), None)
            or or_default(pair.reduce_if_only_right_present(lambda profile: f"#{profile.user_id}: orphan"), None)
            or or_default(pair.reduce_if_both_empty(f"#{user_id}: unknown"), "")
        )
        print(f"[{pair.presence.value}] {summary}")


if __name__ == "__main__":
    run(main)
