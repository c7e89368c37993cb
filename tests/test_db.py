"""Tests for the Database facade."""

from __future__ import annotations

from datetime import UTC, date, datetime

from littleorigins.db import Database
from littleorigins.models.account import FamilyMember, Profile, Role
from littleorigins.models.blog import BlogPost
from littleorigins.models.cart import CartItem
from littleorigins.models.draft import SavedDraft


def _draft(user_id: str, title: str = "Mia's Story") -> SavedDraft:
    return SavedDraft(
        user_id=user_id,
        title=title,
        conception_type="ivf",
        family_structure="two-moms",
        child_name="Mia",
        child_age="3-5",
    )


class TestSchema:
    def test_check_connection(self, db: Database) -> None:
        assert db.check_connection() is True

    def test_in_memory_database(self) -> None:
        mem = Database()
        mem.init_schema()
        created = mem.create_draft(_draft("u1"))
        assert mem.get_draft("u1", created.id) is not None
        mem.close()


class TestProfiles:
    def test_create_and_get(self, db: Database) -> None:
        db.create_profile(Profile(id="u1", first_name="Alex", last_name="Rivera"))
        profile = db.get_profile("u1")
        assert profile is not None
        assert profile.first_name == "Alex"
        assert profile.created_at is not None

    def test_get_missing(self, db: Database) -> None:
        assert db.get_profile("nobody") is None

    def test_update_keeps_avatar_unless_asked(self, db: Database) -> None:
        db.create_profile(Profile(id="u1", avatar_url="https://a.example/1.png"))
        updated = db.update_profile("u1", first_name="Sam", last_name=None)
        assert updated is not None
        assert updated.first_name == "Sam"
        assert updated.avatar_url == "https://a.example/1.png"

        updated = db.update_profile(
            "u1", first_name="Sam", last_name=None, avatar_url=None, update_avatar=True
        )
        assert updated is not None
        assert updated.avatar_url is None

    def test_update_missing(self, db: Database) -> None:
        assert db.update_profile("nobody", first_name="X", last_name=None) is None


class TestDrafts:
    def test_create_assigns_id(self, db: Database) -> None:
        draft = db.create_draft(_draft("u1"))
        assert draft.id is not None
        assert draft.created_at is not None

    def test_list_newest_first(self, db: Database) -> None:
        first = db.create_draft(_draft("u1", "First"))
        second = db.create_draft(_draft("u1", "Second"))
        assert [d.id for d in db.list_drafts("u1")] == [second.id, first.id]

    def test_owner_scoping(self, db: Database) -> None:
        draft = db.create_draft(_draft("u1"))
        db.create_draft(_draft("u2"))
        assert db.get_draft("u2", draft.id) is None
        assert db.delete_draft("u2", draft.id) is False
        assert len(db.list_drafts("u1")) == 1

    def test_delete(self, db: Database) -> None:
        draft = db.create_draft(_draft("u1"))
        assert db.delete_draft("u1", draft.id) is True
        assert db.get_draft("u1", draft.id) is None
        assert db.delete_draft("u1", draft.id) is False


class TestCarts:
    items = [CartItem(id="book-1", title="Mia's Special Story", price=29.99)]

    def test_no_working_cart(self, db: Database) -> None:
        assert db.get_working_cart("u1") is None

    def test_empty_save_without_row_is_noop(self, db: Database) -> None:
        assert db.save_working_cart("u1", [], 0.0) is None
        assert db.get_working_cart("u1") is None

    def test_save_then_update(self, db: Database) -> None:
        created = db.save_working_cart("u1", self.items, 29.99)
        assert created is not None
        assert created.name is None

        updated = db.save_working_cart("u1", [], 0.0)
        assert updated is not None
        assert updated.id == created.id
        assert updated.items == []

    def test_items_survive_json(self, db: Database) -> None:
        db.save_working_cart("u1", self.items, 29.99)
        cart = db.get_working_cart("u1")
        assert cart is not None
        assert cart.items == self.items
        assert cart.total_amount == 29.99

    def test_named_carts_separate_from_working(self, db: Database) -> None:
        db.save_working_cart("u1", self.items, 29.99)
        named = db.create_named_cart("u1", "Birthday", self.items, 29.99)
        assert [c.id for c in db.list_named_carts("u1")] == [named.id]
        assert db.get_named_cart("u1", named.id) is not None
        working = db.get_working_cart("u1")
        assert working is not None
        assert db.get_named_cart("u1", working.id) is None

    def test_named_cart_owner_scoping(self, db: Database) -> None:
        named = db.create_named_cart("u1", "Birthday", self.items, 29.99)
        assert db.get_named_cart("u2", named.id) is None
        assert db.delete_named_cart("u2", named.id) is False
        assert db.delete_named_cart("u1", named.id) is True
        assert db.list_named_carts("u1") == []


class TestFamily:
    def test_member_crud(self, db: Database) -> None:
        member = db.add_family_member(
            FamilyMember(
                user_id="u1", name="Mia", relationship="Daughter", birthdate=date(2021, 4, 2)
            )
        )
        assert member.id is not None
        assert member.birthdate == date(2021, 4, 2)

        updated = db.update_family_member("u1", member.id, relationship="Child")
        assert updated is not None
        assert updated.name == "Mia"
        assert updated.relationship == "Child"

        assert db.update_family_member("u2", member.id, name="X") is None
        assert db.delete_family_member("u1", member.id) is True
        assert db.list_family_members("u1") == []

    def test_story_upsert(self, db: Database) -> None:
        assert db.get_family_story("u1") is None
        first = db.save_family_story("u1", "Once upon a time")
        second = db.save_family_story("u1", "A new chapter")
        assert first.id == second.id
        story = db.get_family_story("u1")
        assert story is not None
        assert story.story == "A new chapter"


class TestBlogPosts:
    def _post(self, slug: str, published: bool) -> BlogPost:
        return BlogPost(
            author_id="author",
            title=slug.replace("-", " ").title(),
            slug=slug,
            content="Body",
            is_published=published,
            published_at=datetime.now(UTC) if published else None,
        )

    def test_published_filter(self, db: Database) -> None:
        db.create_post(self._post("visible", True))
        db.create_post(self._post("hidden", False))
        assert [p.slug for p in db.list_posts()] == ["visible"]
        assert {p.slug for p in db.list_posts(published_only=False)} == {"visible", "hidden"}

    def test_get_by_slug(self, db: Database) -> None:
        created = db.create_post(self._post("hello-world", True))
        found = db.get_post_by_slug("hello-world")
        assert found is not None
        assert found.id == created.id
        assert found.published_at is not None
        assert db.get_post_by_slug("missing") is None

    def test_update_and_delete(self, db: Database) -> None:
        created = db.create_post(self._post("draft-post", False))
        updated = db.update_post(created.model_copy(update={"title": "Renamed"}))
        assert updated is not None
        assert updated.title == "Renamed"
        assert db.delete_post(created.id) is True
        assert db.get_post(created.id) is None
        assert db.delete_post(created.id) is False


class TestRoles:
    def test_grant_is_idempotent(self, db: Database) -> None:
        db.grant_role("u1", Role.AUTHOR)
        db.grant_role("u1", Role.AUTHOR)
        assert db.get_roles("u1") == {Role.AUTHOR}

    def test_has_role(self, db: Database) -> None:
        db.grant_role("u1", Role.ADMIN)
        assert db.has_role("u1", Role.ADMIN)
        assert not db.has_role("u1", Role.AUTHOR)
        assert db.get_roles("u2") == set()
