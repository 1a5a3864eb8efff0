"""Configuration for the GitHub API client."""

from __future__ import annotations

import os
from dataclasses import dataclass

PUBLIC_API_URL = "https://api.github.com"
PUBLIC_UPLOAD_URL = "https://uploads.github.com"
PUBLIC_DOWNLOAD_URL = "https://github.com"


@dataclass(frozen=True)
class GitHubConfig:
    """Configuration for GitHub API client.

    The three base URLs only differ from the public defaults for GitHub Enterprise
    deployments. Release asset downloads are served from `download_url`, uploads
    from `upload_url`, everything else from `api_url`.
    """

    access_token: str = ""
    api_url: str = PUBLIC_API_URL
    upload_url: str = PUBLIC_UPLOAD_URL
    download_url: str = PUBLIC_DOWNLOAD_URL
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> GitHubConfig:
        """Load configuration from environment variables.

        Optional:
            GITHUB_TOKEN: Personal access token (unauthenticated when unset)
            GITHUB_API_URL: Override API base URL (default: https://api.github.com)
            GITHUB_UPLOAD_URL: Override upload base URL (default: https://uploads.github.com)
            GITHUB_DOWNLOAD_URL: Override download base URL (default: https://github.com)
            GITHUB_TIMEOUT: Request timeout in seconds (default: 30)
        """
        raw_timeout = os.environ.get("GITHUB_TIMEOUT", "30")
        try:
            timeout_seconds = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"GITHUB_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None

        return cls(
            access_token=os.environ.get("GITHUB_TOKEN", ""),
            api_url=os.environ.get("GITHUB_API_URL", PUBLIC_API_URL),
            upload_url=os.environ.get("GITHUB_UPLOAD_URL", PUBLIC_UPLOAD_URL),
            download_url=os.environ.get("GITHUB_DOWNLOAD_URL", PUBLIC_DOWNLOAD_URL),
            timeout_seconds=timeout_seconds,
        )
