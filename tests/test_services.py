"""Tests for the services layer against the fake API."""

import pytest

from fittrack.errors import ApiError, SessionExpiredError
from fittrack.models.requests import (
    CreateActivityData,
    LoginCredentials,
    RegisterData,
    UpdateActivityData,
    UpdateProfileData,
)
from fittrack.models.user import TokenPair, User
from fittrack.services import (
    ActivityService,
    AuthService,
    SegmentService,
    SocialService,
    UserService,
)


class TestAuthService:
    """Tests for AuthService."""

    @pytest.mark.asyncio
    async def test_login_stores_tokens_and_user(self, fake_api, make_app, user_payload):
        fake_api.add(
            "POST",
            "/auth/login",
            (200, {"user": user_payload, "access_token": "a1", "refresh_token": "r1"}),
        )
        client, api, store = make_app()

        async with client:
            user = await AuthService(api, store).login(LoginCredentials("alice", "Secret123"))
            tokens = await store.credentials.load()

        assert user.username == "alice"
        assert tokens == TokenPair("a1", "r1")
        assert store.session.user == user
        assert store.session.is_authenticated

    @pytest.mark.asyncio
    async def test_login_failure_leaves_session(self, fake_api, make_app):
        fake_api.add("POST", "/auth/login", (400, {"detail": "Incorrect username or password"}))
        client, api, store = make_app()

        async with client:
            with pytest.raises(ApiError):
                await AuthService(api, store).login(LoginCredentials("alice", "nope"))

        assert store.session.user is None

    @pytest.mark.asyncio
    async def test_register_does_not_log_in(self, fake_api, make_app, user_payload):
        fake_api.add("POST", "/auth/register", (201, user_payload))
        client, api, store = make_app()

        async with client:
            user = await AuthService(api, store).register(
                RegisterData("alice@example.com", "alice", "Secret123")
            )
            tokens = await store.credentials.load()

        assert user.id == 1
        assert tokens.is_empty
        assert not store.session.is_authenticated

    @pytest.mark.asyncio
    async def test_logout_clears_even_when_api_fails(self, fake_api, make_app, user_payload):
        fake_api.add("POST", "/auth/logout", (500, {"detail": "boom"}))
        client, api, store = make_app("a1", "r1")
        store.set_user(User.from_dict(user_payload))

        async with client:
            await AuthService(api, store).logout()
            tokens = await store.credentials.load()

        assert tokens.is_empty
        assert store.session.user is None

    @pytest.mark.asyncio
    async def test_update_profile_replaces_session_user(self, fake_api, make_app, user_payload):
        fake_api.add("PUT", "/users/me", (200, dict(user_payload, bio="Ultra runner")))
        client, api, store = make_app("a1", "r1")

        async with client:
            user = await AuthService(api, store).update_profile(UpdateProfileData(bio="Ultra runner"))

        assert fake_api.json_body(fake_api.requests[0]) == {"bio": "Ultra runner"}
        assert store.session.user.bio == "Ultra runner"
        assert user.bio == "Ultra runner"

    @pytest.mark.asyncio
    async def test_delete_account_logs_out(self, fake_api, make_app):
        fake_api.add("DELETE", "/users/me", (204, None))
        client, api, store = make_app("a1", "r1")

        async with client:
            await AuthService(api, store).delete_account("Secret123")
            assert not await AuthService(api, store).is_authenticated()

        assert fake_api.json_body(fake_api.requests[0]) == {"password": "Secret123"}

    @pytest.mark.asyncio
    async def test_token_helpers(self, make_app):
        client, api, store = make_app("a1", "r1")
        auth = AuthService(api, store)

        async with client:
            assert await auth.is_authenticated()
            assert await auth.get_access_token() == "a1"
            assert await auth.get_refresh_token() == "r1"
            await auth.clear_tokens()
            assert not await auth.is_authenticated()

    @pytest.mark.asyncio
    async def test_session_expiry_resets_store(self, fake_api, make_app, user_payload):
        fake_api.add("GET", "/users/me", (200, user_payload), (401, None))
        fake_api.add("POST", "/auth/refresh", (401, {"detail": "Invalid refresh token"}))
        client, api, store = make_app("a1", "r1")
        auth = AuthService(api, store)

        async with client:
            await auth.get_profile()
            assert store.session.is_authenticated
            with pytest.raises(SessionExpiredError):
                await auth.get_profile()
            tokens = await store.credentials.load()

        assert tokens.is_empty
        assert not store.session.is_authenticated
        assert store.session.user is None


class TestActivityService:
    """Tests for ActivityService store updates."""

    @pytest.mark.asyncio
    async def test_list_fills_store(self, fake_api, make_app, make_activity_payload):
        fake_api.add(
            "GET", "/activities", (200, {"items": [make_activity_payload(1), make_activity_payload(2)]})
        )
        client, api, store = make_app("a1")

        async with client:
            items = await ActivityService(api, store).list_activities()

        assert [a.id for a in items] == [1, 2]
        assert [a.id for a in store.activities.activities] == [1, 2]
        assert not store.activities.is_loading

    @pytest.mark.asyncio
    async def test_list_failure_resets_loading(self, fake_api, make_app):
        fake_api.add("GET", "/activities", (500, None))
        client, api, store = make_app("a1")

        async with client:
            with pytest.raises(ApiError):
                await ActivityService(api, store).list_activities()

        assert not store.activities.is_loading

    @pytest.mark.asyncio
    async def test_create_prepends(self, fake_api, make_app, make_activity_payload):
        fake_api.add("GET", "/activities", (200, [make_activity_payload(1)]))
        fake_api.add("POST", "/activities", (201, make_activity_payload(2, title="New")))
        client, api, store = make_app("a1")
        service = ActivityService(api, store)

        async with client:
            await service.list_activities()
            await service.create_activity(CreateActivityData("New"))

        assert [a.id for a in store.activities.activities] == [2, 1]

    @pytest.mark.asyncio
    async def test_update_merges_feed_and_current(self, fake_api, make_app, make_activity_payload):
        fake_api.add("GET", "/activities", (200, [make_activity_payload(1)]))
        fake_api.add("GET", "/activities/1", (200, make_activity_payload(1)))
        fake_api.add("PUT", "/activities/1", (200, make_activity_payload(1, title="Renamed")))
        client, api, store = make_app("a1")
        service = ActivityService(api, store)

        async with client:
            await service.list_activities()
            await service.get_activity(1)
            await service.update_activity(1, UpdateActivityData(title="Renamed"))

        assert store.activities.get(1).title == "Renamed"
        assert store.activities.current_activity.title == "Renamed"
        assert store.activities.current_activity.distance == 5000.0

    @pytest.mark.asyncio
    async def test_delete_clears_current(self, fake_api, make_app, make_activity_payload):
        fake_api.add("GET", "/activities", (200, [make_activity_payload(1), make_activity_payload(2)]))
        fake_api.add("GET", "/activities/1", (200, make_activity_payload(1)))
        fake_api.add("DELETE", "/activities/1", (204, None))
        client, api, store = make_app("a1")
        service = ActivityService(api, store)

        async with client:
            await service.list_activities()
            await service.get_activity(1)
            await service.delete_activity(1)

        assert [a.id for a in store.activities.activities] == [2]
        assert store.activities.current_activity is None

    @pytest.mark.asyncio
    async def test_kudos_counts(self, fake_api, make_app, make_activity_payload):
        fake_api.add("GET", "/activities", (200, [make_activity_payload(1, kudos_count=2)]))
        fake_api.add("POST", "/social/kudos/1", (200, {"message": "ok"}))
        fake_api.add("DELETE", "/social/kudos/1", (200, {"message": "ok"}))
        client, api, store = make_app("a1")
        service = ActivityService(api, store)

        async with client:
            await service.list_activities()
            await service.give_kudos(1)
            given = store.activities.get(1)
            await service.give_kudos(1)
            assert store.activities.get(1).kudos_count == 3
            await service.remove_kudos(1)

        assert given.has_kudos and given.kudos_count == 3
        assert store.activities.get(1).kudos_count == 2
        assert not store.activities.get(1).has_kudos

    @pytest.mark.asyncio
    async def test_complete(self, fake_api, make_app, make_activity_payload):
        fake_api.add(
            "GET", "/activities", (200, [make_activity_payload(1, status="in_progress", completed_at=None)])
        )
        fake_api.add("POST", "/activities/1/complete", (200, make_activity_payload(1)))
        client, api, store = make_app("a1")
        service = ActivityService(api, store)

        async with client:
            await service.list_activities()
            assert not store.activities.get(1).is_completed
            await service.complete_activity(1)

        assert store.activities.get(1).is_completed
        assert store.activities.get(1).completed_at is not None

    @pytest.mark.asyncio
    async def test_comments(self, fake_api, make_app, make_activity_payload, user_payload):
        fake_api.add("GET", "/activities", (200, [make_activity_payload(1, comments_count=1)]))
        fake_api.add(
            "POST", "/social/comments/1", (201, {"id": 7, "content": "Great pace", "user": user_payload})
        )
        fake_api.add("GET", "/social/comments/1", (200, [{"id": 7, "content": "Great pace"}]))
        client, api, store = make_app("a1")
        service = ActivityService(api, store)

        async with client:
            await service.list_activities()
            comment = await service.add_comment(1, "Great pace")
            comments = await service.get_comments(1)

        assert comment.activity_id == 1
        assert store.activities.get(1).comments_count == 2
        assert [c.content for c in comments] == ["Great pace"]

    @pytest.mark.asyncio
    async def test_upload_gps_points(self, fake_api, make_app):
        fake_api.add("POST", "/activities/1/gps-points", (200, {"count": 1}))
        client, api, store = make_app("a1")
        points = [{"latitude": 40.0, "longitude": -105.3, "timestamp": "2024-03-01T07:00:00Z"}]

        async with client:
            await ActivityService(api, store).upload_gps_points(1, points)

        assert fake_api.json_body(fake_api.requests[0]) == {"points": points}


class TestUserAndSocialServices:
    @pytest.mark.asyncio
    async def test_search(self, fake_api, make_app, user_payload):
        fake_api.add("GET", "/users/search", (200, [user_payload]))
        client, api, _ = make_app("a1")

        async with client:
            users = await UserService(api).search_users("ali", limit=5)

        assert users[0].username == "alice"
        assert dict(fake_api.requests[0].url.params) == {"query": "ali", "limit": "5"}

    @pytest.mark.asyncio
    async def test_user_activities(self, fake_api, make_app, make_activity_payload):
        fake_api.add("GET", "/users/1/activities", (200, {"items": [make_activity_payload(4)]}))
        client, api, _ = make_app("a1")

        async with client:
            activities = await UserService(api).get_user_activities(1)

        assert [a.id for a in activities] == [4]

    @pytest.mark.asyncio
    async def test_follow_and_followers(self, fake_api, make_app, user_payload):
        fake_api.add("POST", "/social/follow/2", (200, {"message": "ok"}))
        fake_api.add("GET", "/social/followers/2", (200, [user_payload]))
        client, api, _ = make_app("a1")
        social = SocialService(api)

        async with client:
            await social.follow(2)
            followers = await social.get_followers(2)

        assert followers[0].id == 1


class TestSegmentService:
    @pytest.mark.asyncio
    async def test_leaderboard_sorted_by_rank(self, fake_api, make_app, user_payload):
        efforts = [
            {"id": 2, "user": user_payload, "elapsed_time": 700, "rank": 2},
            {"id": 1, "user": user_payload, "elapsed_time": 650, "rank": 1, "is_kom": True},
        ]
        fake_api.add("GET", "/segments/3/leaderboard", (200, efforts))
        client, api, _ = make_app("a1")

        async with client:
            leaderboard = await SegmentService(api).get_leaderboard(3)

        assert [e.rank for e in leaderboard] == [1, 2]
        assert leaderboard[0].is_kom
