"""Tests for the projects and pages endpoints."""

import pytest
from unittest.mock import AsyncMock

from common.database import DatabaseError

from framebase.services import PageService, ServiceError

from tests.conftest import OTHER_USER_ID, PAGE_ID, PROJECT_ID, USER_ID


def _owned_page():
    return {"id": PAGE_ID, "project_id": PROJECT_ID, "projects": {"user_id": USER_ID}}


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

class TestProjects:

    def test_list_requires_auth(self, client, mock_db):
        response = client.get("/api/projects")
        assert response.status_code == 401
        mock_db.select.assert_not_called()

    def test_list(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(return_value=[{"id": PROJECT_ID, "name": "My App"}])

        response = client.get("/api/projects", headers=auth_headers)

        assert response.json() == {"success": True, "data": {"projects": [{"id": PROJECT_ID, "name": "My App"}]}}
        mock_db.select.assert_awaited_once_with("projects", {"user_id": USER_ID}, order="created_at")

    def test_list_failure(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(side_effect=DatabaseError("boom"))
        response = client.get("/api/projects", headers=auth_headers)
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to load projects."

    def test_create(self, client, auth_headers, mock_db):
        mock_db.insert = AsyncMock(return_value={"id": PROJECT_ID, "name": "My App"})

        response = client.post("/api/projects", json={"name": "  My App "}, headers=auth_headers)

        assert response.status_code == 200
        mock_db.insert.assert_awaited_once_with("projects", {
            "user_id": USER_ID,
            "name": "My App",
            "platform_type": None,
        })

    def test_create_requires_name(self, client, auth_headers, mock_db):
        response = client.post("/api/projects", json={"name": ""}, headers=auth_headers)
        assert response.status_code == 400
        mock_db.insert.assert_not_called()

    def test_create_failure(self, client, auth_headers, mock_db):
        mock_db.insert = AsyncMock(return_value=None)
        response = client.post("/api/projects", json={"name": "X"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "Project creation failed."

    def test_update_foreign_project(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(return_value={"id": PROJECT_ID, "user_id": OTHER_USER_ID})

        response = client.patch(f"/api/projects/{PROJECT_ID}", json={"name": "New"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "Project not found"
        mock_db.update.assert_not_called()

    def test_update(self, client, auth_headers, mock_db, owned_project):
        mock_db.select = AsyncMock(return_value=owned_project)
        mock_db.update = AsyncMock(return_value={**owned_project, "platform_type": "mobile"})

        response = client.patch(
            f"/api/projects/{PROJECT_ID}",
            json={"platform_type": "mobile"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        mock_db.update.assert_awaited_once_with("projects", {"id": PROJECT_ID}, {"platform_type": "mobile"})

    def test_delete(self, client, auth_headers, mock_db, owned_project):
        mock_db.select = AsyncMock(return_value=owned_project)

        response = client.delete(f"/api/projects/{PROJECT_ID}", headers=auth_headers)

        assert response.json() == {"success": True, "data": {"deleted": True}}
        mock_db.delete.assert_awaited_once_with("projects", {"id": PROJECT_ID})


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

class TestPages:

    def test_list_pages(self, client, auth_headers, mock_db, owned_project):
        mock_db.select = AsyncMock(side_effect=[owned_project, [{"id": PAGE_ID}]])

        response = client.get(f"/api/projects/{PROJECT_ID}/pages", headers=auth_headers)

        assert response.json()["data"] == {"pages": [{"id": PAGE_ID}]}
        assert mock_db.select.await_args_list[1].kwargs["order"] == "order_index"

    def test_create_page_sanitizes_html(self, client, auth_headers, mock_db, owned_project):
        mock_db.select = AsyncMock(return_value=owned_project)
        mock_db.insert = AsyncMock(return_value={"id": PAGE_ID})

        response = client.post(f"/api/projects/{PROJECT_ID}/pages", json={
            "name": "Home",
            "html_content": '<div class="hero">Hi<script>alert(1)</script></div>',
        }, headers=auth_headers)

        assert response.status_code == 200
        row = mock_db.insert.await_args.args[1]
        assert "<script" not in row["html_content"]
        assert "alert" not in row["html_content"]
        assert '<div class="hero">Hi</div>' == row["html_content"]

    def test_create_page_keeps_document_shell(self, client, auth_headers, mock_db, owned_project):
        mock_db.select = AsyncMock(return_value=owned_project)
        mock_db.insert = AsyncMock(return_value={"id": PAGE_ID})
        html = "<html><head></head><body><main><p>Hi</p></main></body></html>"

        response = client.post(f"/api/projects/{PROJECT_ID}/pages", json={
            "name": "Home",
            "html_content": html,
        }, headers=auth_headers)

        assert response.status_code == 200
        assert mock_db.insert.await_args.args[1]["html_content"] == html

    def test_create_page_in_foreign_project(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(return_value={"id": PROJECT_ID, "user_id": OTHER_USER_ID})

        response = client.post(f"/api/projects/{PROJECT_ID}/pages", json={"name": "Home"}, headers=auth_headers)

        assert response.status_code == 404
        mock_db.insert.assert_not_called()

    def test_update_page_only_sends_given_fields(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(return_value=_owned_page())
        mock_db.update = AsyncMock(return_value={"id": PAGE_ID})

        response = client.patch(f"/api/pages/{PAGE_ID}", json={
            "order_index": 2,
            "html_content": '<a href="javascript:alert(1)">x</a>',
        }, headers=auth_headers)

        assert response.status_code == 200
        values = mock_db.update.await_args.args[2]
        assert values == {"order_index": 2, "html_content": "<a>x</a>"}

    def test_update_page_not_owned(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(return_value={"id": PAGE_ID, "projects": {"user_id": OTHER_USER_ID}})

        response = client.patch(f"/api/pages/{PAGE_ID}", json={"name": "X"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "Page not found"

    def test_delete_page(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(return_value=_owned_page())
        response = client.delete(f"/api/pages/{PAGE_ID}", headers=auth_headers)
        assert response.json()["data"] == {"deleted": True}
        mock_db.delete.assert_awaited_once_with("pages", {"id": PAGE_ID})


class TestPageService:

    @pytest.mark.asyncio
    async def test_update_without_result_fails(self, mock_db):
        mock_db.update = AsyncMock(return_value=None)
        with pytest.raises(ServiceError, match="Page update failed."):
            await PageService(mock_db).update_page(PAGE_ID, name="Home")

    @pytest.mark.asyncio
    async def test_delete_error(self, mock_db):
        mock_db.delete = AsyncMock(side_effect=DatabaseError("boom"))
        with pytest.raises(ServiceError, match="Failed to delete page."):
            await PageService(mock_db).delete_page(PAGE_ID)
