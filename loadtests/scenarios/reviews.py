"""Review read and moderation load test scenarios.

``GuestBrowsingUser`` models the public front-end polling filtered review
lists; ``OperatorModerationUser`` models an operator curating reviews with
a read-after-write check on every toggle.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import filter_params, review_id
from loadtests.helpers.state import ModerationState

REVIEWS_URL = "/api/reviews/hostaway"


class GuestBrowsingUser(HttpUser):
    """Anonymous visitors browsing reviews per property."""

    wait_time = between(1, 3)
    weight = 4

    @task(3)
    def list_all(self):
        with self.client.get(REVIEWS_URL, catch_response=True, name="GET /api/reviews/hostaway") as resp:
            if resp.status_code != 200:
                resp.failure(f"List reviews failed: {resp.status_code}")

    @task(5)
    def list_filtered(self):
        with self.client.get(
            REVIEWS_URL,
            params=filter_params(),
            catch_response=True,
            name="GET /api/reviews/hostaway?filters",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Filtered list failed: {resp.status_code}")


class ModerationJourney(SequentialTaskSet):
    """Toggle a review, then confirm the next read reflects it."""

    def on_start(self):
        self.state = ModerationState()

    @task
    def toggle(self):
        target = review_id()
        approved = not self.state.approved.get(target, False)
        with self.client.post(
            f"{REVIEWS_URL}/{target}/approve",
            json={"approved": approved},
            catch_response=True,
            name="POST /api/reviews/hostaway/{id}/approve",
        ) as resp:
            if resp.status_code == 200:
                self.state.review_ids.append(target)
                self.state.approved[target] = approved
            else:
                resp.failure(f"Approve failed: {resp.status_code}")
                self.interrupt()

    @task
    def verify(self):
        target = self.state.review_ids[-1]
        with self.client.get(REVIEWS_URL, catch_response=True, name="GET /api/reviews/hostaway (verify)") as resp:
            if resp.status_code != 200:
                resp.failure(f"Verify read failed: {resp.status_code}")
                return
            flags = {r["id"]: r["approved"] for r in resp.json()["reviews"]}
            # Another operator may have toggled the same review in between.
            if target in flags and flags[target] != self.state.approved[target]:
                resp.failure(f"{target} approval not visible yet")


class OperatorModerationUser(HttpUser):
    """Operators curating which reviews are publicly shown."""

    wait_time = between(2, 5)
    weight = 1
    tasks = [ModerationJourney]
