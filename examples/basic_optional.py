"""
Basic optionals: lookups, fallbacks, and failing on absence.

Run: python examples/basic_optional.py
"""
from optionalpy import Optional, Failure, default_logger


USERS = {"gandalf": {"name": "Gandalf", "title": "the Grey", "staff": None}}


def find_user(key):
    return Optional.of(USERS.get(key))


def main():
    default_logger.set_level("DEBUG")

    # map re-wraps; a None result collapses to empty
    title = find_user("gandalf").map(lambda u: u["title"])
    staff = find_user("gandalf").map(lambda u: u["staff"])
    print("title =>", title)                  # Optional[value=the Grey]
    print("staff =>", staff)                  # Optional[empty]

    # fallbacks
    print("name =>", find_user("frodo").map(lambda u: u["name"]).or_else("anonymous"))
    find_user("gandalf").if_present_or_else(
        lambda u: print("found", u["name"]),
        lambda: print("nobody home"),
    )

    # failing on absence
    try:
        find_user("sauron").or_throw(lambda: "no such user: sauron")
    except Failure as f:
        print("failure =>", f.annotate("op=find_user").render().strip())


if __name__ == "__main__":
    main()
