"""JSON bodies mirroring GitHub's documented example payloads."""

from __future__ import annotations

API_URL = "https://api.github.com"
UPLOAD_URL = "https://uploads.github.com"
DOWNLOAD_URL = "https://github.com"

TEST_TOKEN = "test-token"

OCTOCAT = {"login": "octocat", "id": 1, "type": "User"}

USER = {
    "login": "octocat",
    "id": 1,
    "url": "https://api.github.com/users/octocat",
    "html_url": "https://github.com/octocat",
    "type": "User",
    "site_admin": False,
    "name": "The Octocat",
    "email": "octocat@github.com",
    "created_at": "2011-01-25T18:44:36Z",
}

REPOSITORY = {
    "id": 1296269,
    "name": "Hello-World",
    "full_name": "octocat/Hello-World",
    "owner": OCTOCAT,
    "private": False,
    "description": "This your first repo!",
    "fork": False,
    "default_branch": "main",
    "topics": ["octocat", "api"],
    "archived": False,
    "disabled": False,
    "visibility": "public",
    "html_url": "https://github.com/octocat/Hello-World",
    "pushed_at": "2020-10-31T14:00:00Z",
    "created_at": "2020-01-20T09:00:00Z",
    "updated_at": "2020-10-31T14:00:00Z",
}

PERMISSION = {"permission": "admin", "user": OCTOCAT}

COMMIT_FIX = {
    "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
    "commit": {
        "author": {
            "name": "The Octocat",
            "email": "octocat@github.com",
            "date": "2020-10-20T19:59:59Z",
        },
        "committer": {
            "name": "The Octocat",
            "email": "octocat@github.com",
            "date": "2020-10-20T19:59:59Z",
        },
        "message": "Fix all the bugs",
    },
    "author": OCTOCAT,
    "committer": OCTOCAT,
    "parents": [
        {
            "url": "https://api.github.com/repos/octocat/Hello-World/commits/c3d0be41ecbe669545ee3e94d31ed9a4bc91ee3c",
            "sha": "c3d0be41ecbe669545ee3e94d31ed9a4bc91ee3c",
        }
    ],
}

COMMIT_RELEASE = {
    "sha": "c3d0be41ecbe669545ee3e94d31ed9a4bc91ee3c",
    "commit": {
        "author": {
            "name": "The Octocat",
            "email": "octocat@github.com",
            "date": "2020-10-27T23:59:59Z",
        },
        "committer": {
            "name": "The Octocat",
            "email": "octocat@github.com",
            "date": "2020-10-27T23:59:59Z",
        },
        "message": "Release v0.1.0",
    },
    "author": OCTOCAT,
    "committer": OCTOCAT,
}

COMMITS = [COMMIT_RELEASE, COMMIT_FIX]

BRANCH = {"name": "main", "commit": COMMIT_RELEASE, "protected": True}

TAGS = [
    {
        "name": "v0.1.0",
        "commit": {
            "sha": "c3d0be41ecbe669545ee3e94d31ed9a4bc91ee3c",
            "url": "https://api.github.com/repos/octocat/Hello-World/commits/c3d0be41ecbe669545ee3e94d31ed9a4bc91ee3c",
        },
    }
]

MILESTONE = {"id": 3000, "number": 1, "state": "open", "title": "v1.0"}

ISSUES = [
    {
        "id": 2,
        "url": "https://api.github.com/repos/octocat/Hello-World/issues/1002",
        "html_url": "https://github.com/octocat/Hello-World/pull/1002",
        "number": 1002,
        "state": "closed",
        "title": "Fixed a bug",
        "body": "I made this to work as expected!",
        "user": {"login": "octodog", "id": 2, "type": "User"},
        "labels": [{"id": 2000, "name": "bug", "default": True}],
        "milestone": MILESTONE,
        "locked": False,
        "pull_request": {"url": "https://api.github.com/repos/octocat/Hello-World/pulls/1002"},
        "closed_at": "2020-10-20T20:00:00Z",
        "created_at": "2020-10-15T15:00:00Z",
        "updated_at": "2020-10-22T22:00:00Z",
    },
    {
        "id": 1,
        "url": "https://api.github.com/repos/octocat/Hello-World/issues/1001",
        "html_url": "https://github.com/octocat/Hello-World/issues/1001",
        "number": 1001,
        "state": "open",
        "title": "Found a bug",
        "body": "This is not working as expected!",
        "user": OCTOCAT,
        "labels": [{"id": 2000, "name": "bug", "default": True}],
        "milestone": MILESTONE,
        "locked": True,
        "pull_request": None,
        "closed_at": None,
        "created_at": "2020-10-10T10:00:00Z",
        "updated_at": "2020-10-20T20:00:00Z",
    },
]

PULL = {
    "id": 1,
    "url": "https://api.github.com/repos/octocat/Hello-World/pulls/1002",
    "html_url": "https://github.com/octocat/Hello-World/pull/1002",
    "number": 1002,
    "state": "closed",
    "locked": False,
    "draft": False,
    "title": "Fixed a bug",
    "body": "I made this to work as expected!",
    "user": {"login": "octodog", "id": 2, "type": "User"},
    "labels": [{"id": 2000, "name": "bug", "default": True}],
    "milestone": MILESTONE,
    "created_at": "2020-10-15T15:00:00Z",
    "updated_at": "2020-10-22T22:00:00Z",
    "closed_at": "2020-10-20T20:00:00Z",
    "merged_at": "2020-10-20T20:00:00Z",
    "merge_commit_sha": "e5bd3914e2e596debea16f433f57875b5b90bcd6",
    "head": {
        "label": "octodog:new-topic",
        "ref": "new-topic",
        "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
    },
    "base": {
        "label": "octodog:master",
        "ref": "master",
        "sha": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
    },
    "merged": True,
    "mergeable": None,
    "rebaseable": None,
    "merged_by": {"login": "octofox", "id": 3, "type": "User"},
}

EVENTS = [
    {
        "id": 2,
        "actor": {"login": "octofox", "id": 3, "type": "User"},
        "event": "merged",
        "commit_id": "6dcb09b5b57875f334f61aebed695e2e4193db5e",
        "created_at": "2020-10-20T20:00:00Z",
    },
    {
        "id": 1,
        "actor": OCTOCAT,
        "event": "closed",
        "commit_id": None,
        "created_at": "2020-10-20T20:00:00Z",
    },
]

RELEASE_ASSET = {
    "id": 1,
    "url": "https://api.github.com/repos/octocat/Hello-World/releases/assets/1",
    "browser_download_url": "https://github.com/octocat/Hello-World/releases/download/v1.0.0/example.zip",
    "name": "example.zip",
    "label": "short description",
    "state": "uploaded",
    "content_type": "application/zip",
    "size": 1024,
    "download_count": 42,
    "created_at": "2013-02-27T19:35:32Z",
    "updated_at": "2013-02-27T19:35:32Z",
    "uploader": OCTOCAT,
}

RELEASE = {
    "id": 1,
    "url": "https://api.github.com/repos/octocat/Hello-World/releases/1",
    "html_url": "https://github.com/octocat/Hello-World/releases/v1.0.0",
    "assets_url": "https://api.github.com/repos/octocat/Hello-World/releases/1/assets",
    "upload_url": "https://uploads.github.com/repos/octocat/Hello-World/releases/1/assets{?name,label}",
    "tarball_url": "https://api.github.com/repos/octocat/Hello-World/tarball/v1.0.0",
    "zipball_url": "https://api.github.com/repos/octocat/Hello-World/zipball/v1.0.0",
    "tag_name": "v1.0.0",
    "target_commitish": "main",
    "name": "v1.0.0",
    "body": "Description of the release",
    "draft": False,
    "prerelease": False,
    "created_at": "2013-02-27T19:35:32Z",
    "published_at": "2013-02-27T19:35:32Z",
    "author": OCTOCAT,
    "assets": [RELEASE_ASSET],
}

RATE_HEADERS = {
    "X-RateLimit-Limit": "5000",
    "X-RateLimit-Used": "1",
    "X-RateLimit-Remaining": "4999",
    "X-RateLimit-Reset": "1605083281",
}

COMMITS_LINK = (
    '<https://api.github.com/repositories/1296269/commits?per_page=2&page=3>; rel="next", '
    '<https://api.github.com/repositories/1296269/commits?per_page=2&page=10>; rel="last", '
    '<https://api.github.com/repositories/1296269/commits?per_page=2&page=1>; rel="first", '
    '<https://api.github.com/repositories/1296269/commits?per_page=2&page=1>; rel="prev"'
)
