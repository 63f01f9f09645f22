"""Integration tests for the task endpoints."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest


@pytest.mark.integration
class TestTaskAuthentication:
    def test_requires_bearer_token(self, test_client, api_prefix):
        response = test_client.get(f"{api_prefix}/task")

        assert response.status_code == 401

    def test_rejects_garbage_token(self, test_client, api_prefix):
        response = test_client.get(
            f"{api_prefix}/task",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401


@pytest.mark.integration
class TestCreateAndGetTask:
    def test_create_returns_201_with_location(
        self,
        test_client,
        auth_headers,
        create_user,
        api_prefix,
    ):
        alice = create_user("Alice Smith", "alice@example.com")

        response = test_client.post(
            f"{api_prefix}/task",
            json={
                "title": "Buy milk",
                "description": "2 litres",
                "userId": alice["id"],
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        task = response.json()
        assert task["title"] == "Buy milk"
        assert task["description"] == "2 litres"
        assert task["isCompleted"] is False
        assert task["userId"] == alice["id"]
        assert task["userFullName"] == "Alice Smith"
        assert task["userEmail"] == "alice@example.com"

        location = response.headers["location"]
        assert location.endswith(f"{api_prefix}/task/{task['id']}")

        fetched = test_client.get(location, headers=auth_headers)
        assert fetched.status_code == 200
        assert fetched.json() == task

    def test_create_for_unknown_user_is_rejected(
        self,
        test_client,
        auth_headers,
        api_prefix,
    ):
        response = test_client.post(
            f"{api_prefix}/task",
            json={"title": "Orphan", "userId": str(uuid4())},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "TASK_OWNER_NOT_FOUND"

    def test_create_without_title_is_rejected(
        self,
        test_client,
        auth_headers,
        create_user,
        api_prefix,
    ):
        alice = create_user("Alice Smith", "alice@example.com")

        response = test_client.post(
            f"{api_prefix}/task",
            json={"userId": alice["id"]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"

    def test_get_missing_task_returns_404_with_empty_body(
        self,
        test_client,
        auth_headers,
        api_prefix,
    ):
        response = test_client.get(
            f"{api_prefix}/task/{uuid4()}",
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.content == b""

    def test_malformed_id_is_a_validation_error(
        self,
        test_client,
        auth_headers,
        api_prefix,
    ):
        response = test_client.get(
            f"{api_prefix}/task/not-a-uuid",
            headers=auth_headers,
        )

        assert response.status_code == 400


@pytest.mark.integration
class TestListTasks:
    @pytest.fixture
    def milk_and_bread(self, create_user, create_task):
        alice = create_user("Alice Smith", "alice@example.com")
        bob = create_user("Bob Jones", "bob@example.com")
        milk = create_task("Buy milk", alice["id"])
        bread = create_task("Buy bread", bob["id"])
        return alice, bob, milk, bread

    def _titles(self, test_client, auth_headers, api_prefix, **params) -> list[str]:
        response = test_client.get(
            f"{api_prefix}/task",
            params=params,
            headers=auth_headers,
        )
        assert response.status_code == 200
        return sorted(task["title"] for task in response.json())

    def test_title_filter(self, test_client, auth_headers, api_prefix, milk_and_bread):
        assert self._titles(test_client, auth_headers, api_prefix, title="buy") == [
            "Buy bread",
            "Buy milk",
        ]
        assert self._titles(test_client, auth_headers, api_prefix, title="milk") == [
            "Buy milk",
        ]

    def test_owner_name_filter(
        self,
        test_client,
        auth_headers,
        api_prefix,
        milk_and_bread,
    ):
        titles = self._titles(
            test_client,
            auth_headers,
            api_prefix,
            userFullName="bob",
        )

        assert titles == ["Buy bread"]
        assert self._titles(
            test_client,
            auth_headers,
            api_prefix,
            userFullName="alice",
        ) == ["Buy milk"]

    def test_owner_id_filter(
        self,
        test_client,
        auth_headers,
        api_prefix,
        milk_and_bread,
    ):
        alice, _, _, _ = milk_and_bread

        titles = self._titles(
            test_client,
            auth_headers,
            api_prefix,
            userId=alice["id"],
        )

        assert titles == ["Buy milk"]

    def test_completion_filter(
        self,
        test_client,
        auth_headers,
        api_prefix,
        milk_and_bread,
    ):
        assert self._titles(
            test_client,
            auth_headers,
            api_prefix,
            isCompleted="false",
        ) == ["Buy bread", "Buy milk"]
        assert (
            self._titles(test_client, auth_headers, api_prefix, isCompleted="true")
            == []
        )

    def test_creation_window_filter(
        self,
        test_client,
        auth_headers,
        api_prefix,
        milk_and_bread,
    ):
        future = (datetime.now(tz=timezone.utc) + timedelta(days=1)).isoformat()
        past = (datetime.now(tz=timezone.utc) - timedelta(days=1)).isoformat()

        assert (
            self._titles(test_client, auth_headers, api_prefix, createdAfter=future)
            == []
        )
        assert self._titles(
            test_client,
            auth_headers,
            api_prefix,
            createdAfter=past,
            createdBefore=future,
        ) == ["Buy bread", "Buy milk"]

    def test_malformed_filter_is_rejected(
        self,
        test_client,
        auth_headers,
        api_prefix,
    ):
        response = test_client.get(
            f"{api_prefix}/task",
            params={"isCompleted": "maybe"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "isCompleted"


@pytest.mark.integration
class TestUpdateAndDeleteTask:
    def test_update_then_get(
        self,
        test_client,
        auth_headers,
        create_user,
        create_task,
        api_prefix,
    ):
        alice = create_user("Alice Smith", "alice@example.com")
        task = create_task("Buy milk", alice["id"])

        response = test_client.put(
            f"{api_prefix}/task/{task['id']}",
            json={
                "title": "Buy oat milk",
                "description": "1 litre",
                "isCompleted": True,
            },
            headers=auth_headers,
        )

        assert response.status_code == 204
        fetched = test_client.get(
            f"{api_prefix}/task/{task['id']}",
            headers=auth_headers,
        ).json()
        assert fetched["title"] == "Buy oat milk"
        assert fetched["description"] == "1 litre"
        assert fetched["isCompleted"] is True
        assert fetched["userId"] == alice["id"]

    def test_update_missing_task_returns_404(
        self,
        test_client,
        auth_headers,
        api_prefix,
    ):
        response = test_client.put(
            f"{api_prefix}/task/{uuid4()}",
            json={"title": "Nothing", "isCompleted": False},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_delete_then_get_returns_404(
        self,
        test_client,
        auth_headers,
        create_user,
        create_task,
        api_prefix,
    ):
        alice = create_user("Alice Smith", "alice@example.com")
        task = create_task("Buy milk", alice["id"])

        deleted = test_client.delete(
            f"{api_prefix}/task/{task['id']}",
            headers=auth_headers,
        )
        again = test_client.delete(
            f"{api_prefix}/task/{task['id']}",
            headers=auth_headers,
        )

        assert deleted.status_code == 204
        assert again.status_code == 404
        assert (
            test_client.get(
                f"{api_prefix}/task/{task['id']}",
                headers=auth_headers,
            ).status_code
            == 404
        )
