from __future__ import annotations

import time

from _infra import banner, or_default, run, seeded_directory
from kungfu import Ok

import optpair


def render_card(user, profile) -> str:
    time.sleep(0.01)  # blocking work, kept off the event loop
    return f"<card name={user.name!r} bio={profile.bio!r}>"


async def main() -> None:
    banner("02_then_combine: inline vs worker tasks")

    directory = seeded_directory()
    pair = (
        optpair.of(directory.find_user(1), directory.find_profile(1))
        .filter(lambda user, profile: user.id == profile.user_id)
        .run_if_both_empty(lambda: print("ids disagree, dropping pair"))
    )

    inline = pair.then_combine(lambda user, profile: user.name)
    worker = pair.then_combine_async(render_card)

    for task in (inline, worker):
        match await task:
            case Ok(option):
                print(or_default(option, "<nothing>"))


if __name__ == "__main__":
    run(main)
