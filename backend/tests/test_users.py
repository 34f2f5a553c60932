from __future__ import annotations

from solesociety.core.security import verify_password
from solesociety.services.users import DEMO_LIKED_STYLE_IDS, UserRepository


def test_create_user_hashes_password(run_repo) -> None:
    user = run_repo(lambda repo: repo.create_user("sneakerhead", "hunter2"))

    assert user.id
    assert user.username == "sneakerhead"
    assert user.password_hash != "hunter2"
    assert verify_password("hunter2", user.password_hash)
    assert user.liked_style_ids == []
    assert user.shoe_size is None


def test_duplicate_username_is_case_insensitive(run_repo) -> None:
    assert run_repo(lambda repo: repo.create_user("Kicks", "pw")) is not None
    assert run_repo(lambda repo: repo.create_user("kicks", "other")) is None


def test_authenticate(run_repo) -> None:
    run_repo(lambda repo: repo.create_user("runner", "correct"))

    assert run_repo(lambda repo: repo.authenticate("runner", "correct")).username == "runner"
    assert run_repo(lambda repo: repo.authenticate("RUNNER", "correct")) is not None
    assert run_repo(lambda repo: repo.authenticate("runner", "wrong")) is None
    assert run_repo(lambda repo: repo.authenticate("nobody", "correct")) is None


def test_current_user_pointer(run_repo) -> None:
    assert run_repo(lambda repo: repo.get_current_user()) is None

    first = run_repo(lambda repo: repo.create_user("first", "pw"))
    second = run_repo(lambda repo: repo.create_user("second", "pw"))

    async def switch(repo: UserRepository, user_id: str):
        await repo.set_current_user(await repo.get_user(user_id))
        return await repo.get_current_user()

    assert run_repo(lambda repo: switch(repo, first.id)).id == first.id
    assert run_repo(lambda repo: switch(repo, second.id)).id == second.id
    assert run_repo(lambda repo: repo.get_current_user()).id == second.id

    run_repo(lambda repo: repo.clear_current_user())
    assert run_repo(lambda repo: repo.get_current_user()) is None
    # clearing twice is harmless
    run_repo(lambda repo: repo.clear_current_user())


def test_toggle_like(run_repo) -> None:
    user = run_repo(lambda repo: repo.create_user("liker", "pw"))

    assert run_repo(lambda repo: repo.toggle_like(user.id, "FY2903")) is True
    assert run_repo(lambda repo: repo.toggle_like(user.id, "DZ5485-612")) is True
    assert run_repo(lambda repo: repo.is_liked(user.id, "FY2903")) is True
    assert run_repo(lambda repo: repo.get_liked_style_ids(user.id)) == ["FY2903", "DZ5485-612"]

    assert run_repo(lambda repo: repo.toggle_like(user.id, "FY2903")) is False
    assert run_repo(lambda repo: repo.is_liked(user.id, "FY2903")) is False
    assert run_repo(lambda repo: repo.get_liked_style_ids(user.id)) == ["DZ5485-612"]


def test_likes_for_unknown_user(run_repo) -> None:
    assert run_repo(lambda repo: repo.toggle_like("missing", "FY2903")) is None
    assert run_repo(lambda repo: repo.is_liked("missing", "FY2903")) is False
    assert run_repo(lambda repo: repo.get_liked_style_ids("missing")) == []


def test_update_shoe_size(run_repo) -> None:
    user = run_repo(lambda repo: repo.create_user("sized", "pw"))

    assert run_repo(lambda repo: repo.update_shoe_size(user.id, "10.5")).shoe_size == "10.5"
    assert run_repo(lambda repo: repo.get_user(user.id)).shoe_size == "10.5"
    assert run_repo(lambda repo: repo.update_shoe_size(user.id, "")).shoe_size is None
    assert run_repo(lambda repo: repo.update_shoe_size("missing", "9")) is None


def test_seed_demo_user_only_on_empty_store(run_repo) -> None:
    demo = run_repo(lambda repo: repo.seed_demo_user())

    assert demo.username == "demo"
    assert run_repo(lambda repo: repo.get_liked_style_ids(demo.id)) == DEMO_LIKED_STYLE_IDS
    assert run_repo(lambda repo: repo.authenticate("demo", "password")) is not None

    assert run_repo(lambda repo: repo.seed_demo_user()) is None
    assert run_repo(lambda repo: repo.count_users()) == 1
