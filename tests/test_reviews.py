"""
Tests for the Reviews API

Tests the review endpoints:
- List / get reviews
- Create a review (one per user per POS)
- Update review text
- Delete a review
- Filter reviews of a POS by approval state
- Approve a review (quorum of two in tests)
"""

from fastapi import status
from fastapi.testclient import TestClient

from campuscoffee.models import Pos, Review, User


# =============================================================================
# List / Get
# =============================================================================


class TestGetReviews:
    """Tests for GET /api/v1/reviews and GET /api/v1/reviews/{review_id}"""

    def test_list_reviews_empty(self, client: TestClient):
        response = client.get("/api/v1/reviews")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_reviews_with_data(self, client: TestClient, sample_review: Review):
        response = client.get("/api/v1/reviews")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == sample_review.id
        assert data[0]["approval_count"] == 0
        assert data[0]["approved"] is False

    def test_get_review(self, client: TestClient, sample_review: Review):
        response = client.get(f"/api/v1/reviews/{sample_review.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["review"] == "Great espresso, friendly staff."
        assert data["pos_id"] == sample_review.pos_id
        assert data["author_id"] == sample_review.author_id

    def test_get_review_not_found(self, client: TestClient):
        response = client.get("/api/v1/reviews/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "99999" in response.json()["detail"]


# =============================================================================
# Create
# =============================================================================


class TestCreateReview:
    """Tests for POST /api/v1/reviews"""

    def test_create_review_success(self, client: TestClient, sample_pos: Pos, sample_user: User):
        response = client.post(
            "/api/v1/reviews",
            json={
                "pos_id": sample_pos.id,
                "author_id": sample_user.id,
                "review": "Best cappuccino on campus.",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] is not None
        assert data["review"] == "Best cappuccino on campus."
        assert data["approval_count"] == 0
        assert data["approved"] is False

    def test_create_review_duplicate(
        self, client: TestClient, sample_review: Review, sample_user: User
    ):
        response = client.post(
            "/api/v1/reviews",
            json={
                "pos_id": sample_review.pos_id,
                "author_id": sample_user.id,
                "review": "Trying again.",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "only once" in response.json()["detail"]

    def test_create_review_pos_not_found(self, client: TestClient, sample_user: User):
        response = client.post(
            "/api/v1/reviews",
            json={"pos_id": 99999, "author_id": sample_user.id, "review": "Where is it?"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Pos" in response.json()["detail"]

    def test_create_review_blank_text(self, client: TestClient, sample_pos: Pos, sample_user: User):
        response = client.post(
            "/api/v1/reviews",
            json={"pos_id": sample_pos.id, "author_id": sample_user.id, "review": "   "},
        )

        assert response.status_code == 422

    def test_create_review_too_long(self, client: TestClient, sample_pos: Pos, sample_user: User):
        response = client.post(
            "/api/v1/reviews",
            json={"pos_id": sample_pos.id, "author_id": sample_user.id, "review": "x" * 2001},
        )

        assert response.status_code == 422

    def test_create_review_max_length(self, client: TestClient, sample_pos: Pos, sample_user: User):
        response = client.post(
            "/api/v1/reviews",
            json={"pos_id": sample_pos.id, "author_id": sample_user.id, "review": "x" * 2000},
        )

        assert response.status_code == status.HTTP_201_CREATED


# =============================================================================
# Update / Delete
# =============================================================================


class TestUpdateReview:
    """Tests for PUT /api/v1/reviews/{review_id}"""

    def test_update_review_text(self, client: TestClient, sample_review: Review):
        response = client.put(
            f"/api/v1/reviews/{sample_review.id}",
            json={"review": "Updated: still great."},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_review.id
        assert data["review"] == "Updated: still great."

    def test_update_keeps_approvals(
        self, client: TestClient, sample_review: Review, second_user: User
    ):
        client.put(f"/api/v1/reviews/{sample_review.id}/approve", params={"user_id": second_user.id})

        response = client.put(
            f"/api/v1/reviews/{sample_review.id}",
            json={"review": "Edited after approval."},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["approval_count"] == 1

    def test_update_review_not_found(self, client: TestClient):
        response = client.put("/api/v1/reviews/99999", json={"review": "Nope."})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteReview:
    """Tests for DELETE /api/v1/reviews/{review_id}"""

    def test_delete_review(self, client: TestClient, sample_review: Review):
        review_id = sample_review.id

        response = client.delete(f"/api/v1/reviews/{review_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/reviews/{review_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_review_not_found(self, client: TestClient):
        response = client.delete("/api/v1/reviews/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Filter
# =============================================================================


class TestFilterReviews:
    """Tests for GET /api/v1/reviews/filter"""

    def test_filter_pending(self, client: TestClient, sample_review: Review):
        response = client.get(
            "/api/v1/reviews/filter",
            params={"pos_id": sample_review.pos_id, "approved": False},
        )

        assert response.status_code == status.HTTP_200_OK
        assert [r["id"] for r in response.json()] == [sample_review.id]

    def test_filter_approved(
        self,
        client: TestClient,
        sample_review: Review,
        second_user: User,
        third_user: User,
    ):
        pos_id = sample_review.pos_id
        for user in (second_user, third_user):
            client.put(f"/api/v1/reviews/{sample_review.id}/approve", params={"user_id": user.id})

        approved = client.get("/api/v1/reviews/filter", params={"pos_id": pos_id, "approved": True})
        pending = client.get("/api/v1/reviews/filter", params={"pos_id": pos_id, "approved": False})

        assert [r["id"] for r in approved.json()] == [sample_review.id]
        assert pending.json() == []

    def test_filter_pos_not_found(self, client: TestClient):
        response = client.get("/api/v1/reviews/filter", params={"pos_id": 999, "approved": True})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_filter_requires_parameters(self, client: TestClient):
        response = client.get("/api/v1/reviews/filter")

        assert response.status_code == 422


# =============================================================================
# Approve
# =============================================================================


class TestApproveReview:
    """Tests for PUT /api/v1/reviews/{review_id}/approve"""

    def test_approve_until_quorum(
        self,
        client: TestClient,
        sample_review: Review,
        second_user: User,
        third_user: User,
    ):
        url = f"/api/v1/reviews/{sample_review.id}/approve"

        first = client.put(url, params={"user_id": second_user.id})
        assert first.status_code == status.HTTP_200_OK
        assert first.json()["approval_count"] == 1
        assert first.json()["approved"] is False

        second = client.put(url, params={"user_id": third_user.id})
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["approval_count"] == 2
        assert second.json()["approved"] is True

    def test_approve_own_review(self, client: TestClient, sample_review: Review, sample_user: User):
        response = client.put(
            f"/api/v1/reviews/{sample_review.id}/approve",
            params={"user_id": sample_user.id},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "own review" in response.json()["detail"]

    def test_approve_unknown_user(self, client: TestClient, sample_review: Review):
        response = client.put(
            f"/api/v1/reviews/{sample_review.id}/approve",
            params={"user_id": 99999},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User does not exist."

    def test_approve_twice(self, client: TestClient, sample_review: Review, second_user: User):
        url = f"/api/v1/reviews/{sample_review.id}/approve"
        client.put(url, params={"user_id": second_user.id})

        response = client.put(url, params={"user_id": second_user.id})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(f"/api/v1/reviews/{sample_review.id}").json()["approval_count"] == 1

    def test_approve_unknown_review(self, client: TestClient, second_user: User):
        response = client.put("/api/v1/reviews/99999/approve", params={"user_id": second_user.id})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_approve_requires_user_id(self, client: TestClient, sample_review: Review):
        response = client.put(f"/api/v1/reviews/{sample_review.id}/approve")

        assert response.status_code == 422
