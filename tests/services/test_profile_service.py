"""ProfileService: upsert semantics and experience/education list edits.

Decisions exercised here:
    - Removing an unknown entry id is a no-op
    - Editing entries without a profile raises NotFound
"""
import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFound, StoreError
from app.models.profile import Profile
from app.models.user import User
from app.schemas.profile import EducationCreate, ExperienceCreate, ProfileUpsert
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService


@pytest.fixture
async def user_id(db):
    token = await AuthService.register(db, "A", "a@a.com", "secret1")
    return AuthService.resolve_token(token)


def _experience(title="Dev", company="Acme", start="2019-01-01"):
    return ExperienceCreate(title=title, company=company, from_=start)


def _snapshot(profile):
    return {
        column: getattr(profile, column)
        for column in (
            "company", "website", "location", "bio", "status", "githubusername",
            "skills", "social", "experience", "education",
        )
    }


async def test_upsert_creates_profile(db, user_id):
    profile = await ProfileService.upsert_profile(
        db, user_id, ProfileUpsert(status="Developer", skills="a, b , c", company="Acme")
    )

    assert profile.user_id == user_id
    assert profile.skills == ["a", "b", "c"]
    assert profile.company == "Acme"
    assert profile.website is None
    assert profile.experience == [] and profile.education == []
    assert profile.user.name == "A"


async def test_upsert_is_idempotent(db, user_id):
    fields = ProfileUpsert(status="Developer", skills="a,b", bio="Hi", youtube="yt")

    first = _snapshot(await ProfileService.upsert_profile(db, user_id, fields))
    second = _snapshot(await ProfileService.upsert_profile(db, user_id, fields))

    assert first == second
    assert db.query(Profile).count() == 1


async def test_upsert_keeps_fields_not_resubmitted(db, user_id):
    await ProfileService.upsert_profile(
        db, user_id,
        ProfileUpsert(status="Junior", skills="a", company="Acme", twitter="tw"),
    )

    profile = await ProfileService.upsert_profile(
        db, user_id,
        ProfileUpsert(status="Senior", skills="a, b", company="", linkedin="li"),
    )

    assert profile.status == "Senior"
    assert profile.skills == ["a", "b"]
    assert profile.company == "Acme"
    assert profile.social == {"twitter": "tw", "linkedin": "li"}


async def test_get_own_profile_missing(db, user_id):
    with pytest.raises(NotFound) as exc_info:
        await ProfileService.get_own_profile(db, user_id)

    assert exc_info.value.message == "There is no profile for this user"


@pytest.mark.parametrize("bad_id", ["123", "not-an-id", ""])
async def test_get_profile_by_malformed_user_id(db, bad_id):
    with pytest.raises(NotFound) as exc_info:
        await ProfileService.get_profile_by_user_id(db, bad_id)

    assert exc_info.value.message == "Profile not found"


async def test_get_profile_by_user_id(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))

    profile = await ProfileService.get_profile_by_user_id(db, user_id)

    assert profile.user_id == user_id


async def test_list_profiles_joins_owner(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))
    other = AuthService.resolve_token(await AuthService.register(db, "B", "b@b.com", "secret1"))
    await ProfileService.upsert_profile(db, other, ProfileUpsert(status="Ops", skills="b"))

    profiles = await ProfileService.list_profiles(db)

    assert [p.user.name for p in profiles] == ["A", "B"]
    assert all(p.user.avatar for p in profiles)


async def test_added_experience_comes_first(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))
    await ProfileService.add_experience(db, user_id, _experience(title="First"))

    profile = await ProfileService.add_experience(db, user_id, _experience(title="Second"))

    assert [e["title"] for e in profile.experience] == ["Second", "First"]
    assert profile.experience[0]["from"] == "2019-01-01"
    assert profile.experience[0]["id"] != profile.experience[1]["id"]


async def test_remove_experience_by_id(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))
    await ProfileService.add_experience(db, user_id, _experience(title="Keep"))
    profile = await ProfileService.add_experience(db, user_id, _experience(title="Drop"))

    profile = await ProfileService.remove_experience(db, user_id, profile.experience[0]["id"])

    assert [e["title"] for e in profile.experience] == ["Keep"]


async def test_remove_unknown_experience_is_noop(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))
    before = (await ProfileService.add_experience(db, user_id, _experience())).experience

    profile = await ProfileService.remove_experience(db, user_id, "missing-id")

    assert profile.experience == before


async def test_experience_without_profile(db, user_id):
    with pytest.raises(NotFound):
        await ProfileService.add_experience(db, user_id, _experience())
    with pytest.raises(NotFound):
        await ProfileService.remove_experience(db, user_id, "any")


async def test_education_add_and_remove(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))
    entry = EducationCreate(school="MIT", degree="BSc", fieldofstudy="CS", from_="2010-09-01")

    profile = await ProfileService.add_education(db, user_id, entry)
    assert profile.education[0]["school"] == "MIT"

    profile = await ProfileService.remove_education(db, user_id, profile.education[0]["id"])
    assert profile.education == []


async def test_delete_profile_and_user(db, user_id):
    await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))

    await ProfileService.delete_profile_and_user(db, user_id)

    db.expire_all()
    assert db.query(Profile).count() == 0
    assert db.query(User).count() == 0


async def test_delete_user_without_profile(db, user_id):
    await ProfileService.delete_profile_and_user(db, user_id)

    db.expire_all()
    assert db.query(User).count() == 0


async def test_commit_failure_becomes_store_error(db, user_id, monkeypatch):
    def fail():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, "commit", fail)

    with pytest.raises(StoreError):
        await ProfileService.upsert_profile(db, user_id, ProfileUpsert(status="Dev", skills="a"))
