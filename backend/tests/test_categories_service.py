"""Category service against seeded SQLite: HTML (1, html), CSS (2, css), JavaScript (3, javascript)."""
import pytest
from sqlalchemy.exc import IntegrityError

from qbank.schemas.category import CategoryCreate, CategoryUpdate
from qbank.schemas.question import QuestionCreate
from qbank.services import categories as svc
from qbank.services.questions import create_question
from qbank.services.slugs import slugify


def test_get_categories_pagination(db):
    first = svc.get_categories(db, limit=2, offset=0)
    assert [c.id for c in first] == [1, 2]
    rest = svc.get_categories(db, limit=2, offset=2)
    assert [c.id for c in rest] == [3]
    assert svc.get_categories(db, limit=2, offset=3) == []


def test_get_categories_default_page_size(db):
    for i in range(12):
        svc.create_category(db, CategoryCreate(title=f"Topic {i}"))
    page = svc.get_categories(db)
    assert len(page) == 10
    assert [c.id for c in page] == sorted(c.id for c in page)


def test_get_category_by_slug(db):
    category = svc.get_category_by_slug(db, "html")
    assert category is not None
    assert category.title == "HTML"
    assert svc.get_category_by_slug(db, "nonexistent") is None


def test_create_category_derives_slug(db):
    created = svc.create_category(db, CategoryCreate(title="React"))
    assert created.id == 4
    assert created.title == "React"
    assert created.slug == "react"
    assert svc.get_category_by_slug(db, "react").id == created.id


def test_create_category_slug_matches_slugify(db):
    title = "  Web   Accessibility (a11y)  "
    created = svc.create_category(db, CategoryCreate(title=title))
    assert created.slug == slugify(title) == "web-accessibility-a11y"


def test_create_duplicate_title_violates_constraint(db):
    with pytest.raises(IntegrityError):
        svc.create_category(db, CategoryCreate(title="HTML"))
    # session rolled back and usable
    assert len(svc.get_categories(db)) == 3


def test_create_colliding_slug_violates_constraint(db):
    with pytest.raises(IntegrityError):
        svc.create_category(db, CategoryCreate(title="Html"))
    assert svc.get_category_by_slug(db, "html").title == "HTML"


def test_update_category_title_moves_slug(db):
    updated = svc.update_category(db, "html", CategoryUpdate(title="Updated HTML"))
    assert updated is not None
    assert updated.id == 1
    assert updated.title == "Updated HTML"
    assert updated.slug == "updated-html"
    assert svc.get_category_by_slug(db, "html") is None
    assert svc.get_category_by_slug(db, "updated-html").id == 1


def test_update_category_without_title_keeps_record(db):
    updated = svc.update_category(db, "javascript", CategoryUpdate())
    assert (updated.id, updated.title, updated.slug) == (3, "JavaScript", "javascript")


def test_update_category_same_title_keeps_slug(db):
    updated = svc.update_category(db, "javascript", CategoryUpdate(title="JavaScript"))
    assert (updated.id, updated.slug) == (3, "javascript")


def test_seeded_slugs_follow_titles(db):
    seeded = svc.get_categories(db)
    assert [(c.title, c.slug) for c in seeded] == [("HTML", "html"), ("CSS", "css"), ("JavaScript", "javascript")]
    assert [c for c in seeded if c.slug != slugify(c.title)] == []


def test_update_missing_category_returns_none(db):
    assert svc.update_category(db, "nonexistent", CategoryUpdate(title="This will fail")) is None


def test_delete_category(db):
    deleted = svc.delete_category(db, "css")
    assert deleted is not None
    assert deleted.title == "CSS"
    assert svc.get_category_by_slug(db, "css") is None


def test_delete_missing_category_returns_none(db):
    assert svc.delete_category(db, "nonexistent") is None


def test_delete_category_with_questions_is_restricted(db):
    create_question(db, QuestionCreate(question="What is CSS?", answer="A styling language", categoryId=2))
    with pytest.raises(IntegrityError):
        svc.delete_category(db, "css")
    db.expire_all()
    assert svc.get_category_by_slug(db, "css") is not None
