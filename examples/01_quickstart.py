from __future__ import annotations

from _infra import User, banner, run, sample_users

from kungfu import Nothing, Some
from seqkit import Desc, setup_logger


def by_age(user: User) -> int:
    return user.age


def main() -> None:
    setup_logger()
    users = sample_users()

    banner("01_quickstart: sort_on + distinct_by + arrange_by")

    # City ascending, then oldest first within a city.
    for user in users.sort_on(lambda u: u.city, Desc(by_age)):
        print(f"{user.city:10} {user.age:3} {user.name}")

    print("one per city:", users.distinct_by(lambda u: u.city).pluck("name"))
    print("inactive removed:", users.remove_all(users.filter(lambda u: not u.is_active)).length())
    print("youngest:", users.min_on(by_age).map(lambda u: u.name))
    print("total age:", users.sum_on(by_age))

    match users.arrange_by(lambda u: u.id):
        case Some(by_id):
            print("by id:", by_id.keys())
        case Nothing():
            print("ids are not unique")

    match users.arrange_by(lambda u: u.age):
        case Some(_):
            print("ages are unique")
        case Nothing():
            print("ages are not unique")


if __name__ == "__main__":
    run(main)
