"""Tests for task filter coercion."""

import pytest

from taskboard.services.task_query import MAX_LIMIT, MAX_PAGE, TaskFilters, escape_like


class TestTaskFilters:
    """Tests for TaskFilters.from_params."""

    def test_defaults(self):
        filters = TaskFilters.from_params()
        assert filters == TaskFilters(
            status="all",
            search=None,
            category_id=None,
            overdue=False,
            sort_by="createdAt",
            order="desc",
            page=1,
            limit=10,
        )
        assert filters.offset == 0

    def test_valid_values(self):
        filters = TaskFilters.from_params(
            status="pending",
            search="  milk ",
            category_id="7",
            overdue="true",
            sort_by="dueDate",
            order="asc",
            page="3",
            limit="20",
        )
        assert filters.status == "pending"
        assert filters.search == "  milk "
        assert filters.category_id == 7
        assert filters.overdue is True
        assert filters.sort_by == "dueDate"
        assert filters.order == "asc"
        assert filters.offset == 40

    @pytest.mark.parametrize("value", ["abc", "0", "-1", "", "1.5"])
    def test_bad_page_and_limit(self, value):
        filters = TaskFilters.from_params(page=value, limit=value)
        assert filters.page == 1
        assert filters.limit == 10

    @pytest.mark.parametrize("value", ["abc", "", "1e3"])
    def test_bad_category_id_ignored(self, value):
        assert TaskFilters.from_params(category_id=value).category_id is None

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", True), ("TRUE", True), ("1", True), ("false", False), ("yes", False)],
    )
    def test_overdue_flag(self, value, expected):
        assert TaskFilters.from_params(overdue=value).overdue is expected

    def test_unknown_enums_fall_back(self):
        filters = TaskFilters.from_params(status="done", sort_by="priority", order="up")
        assert filters.status == "all"
        assert filters.sort_by == "createdAt"
        assert filters.order == "desc"

    def test_blank_search_ignored(self):
        assert TaskFilters.from_params(search="   ").search is None

    def test_huge_page_and_limit_are_capped(self):
        huge = "99999999999999999999"
        filters = TaskFilters.from_params(page=huge, limit=huge)
        assert filters.page == MAX_PAGE
        assert filters.limit == MAX_LIMIT
        assert filters.offset < 2**63 - 1

    def test_huge_category_id_ignored(self):
        assert TaskFilters.from_params(category_id="99999999999999999999").category_id is None

    def test_search_keeps_surrounding_spaces(self):
        assert TaskFilters.from_params(search=" milk").search == " milk"


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
