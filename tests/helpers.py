"""Builders for sample next responses and a scripted adapter."""

from typing import Any

from sidebarunlock.sources.base import SourceAdapter


VIDEO_ID = "dQw4w9WgXcQ"


def desktop_response(
    video_id: str | None = VIDEO_ID,
    sidebar: bool = False,
    description: Any = None,
) -> dict[str, Any]:
    """Build a desktop (two column) next response."""
    info: dict[str, Any] = {"owner": {"videoOwnerRenderer": {"title": "Channel"}}}
    if description is not None:
        info["description"] = description

    secondary: dict[str, Any] = {"secondaryResults": {}}
    if sidebar:
        secondary = {
            "secondaryResults": {
                "results": [
                    {"compactVideoRenderer": {"videoId": "related1"}},
                    {"compactVideoRenderer": {"videoId": "related2"}},
                ]
            }
        }

    response: dict[str, Any] = {
        "contents": {
            "twoColumnWatchNextResults": {
                "results": {
                    "results": {
                        "contents": [
                            {"videoPrimaryInfoRenderer": {"title": "Title"}},
                            {"videoSecondaryInfoRenderer": info},
                        ]
                    }
                },
                "secondaryResults": secondary,
            }
        },
        "currentVideoEndpoint": {"watchEndpoint": {}},
    }
    if video_id is not None:
        response["currentVideoEndpoint"]["watchEndpoint"]["videoId"] = video_id
    return response


def single_column_response(
    video_id: str | None = VIDEO_ID,
    sidebar: bool = False,
    description_body: Any = None,
) -> dict[str, Any]:
    """Build a single column (mobile) next response."""
    contents: list[dict[str, Any]] = [
        {"slimVideoMetadataSectionRenderer": {"contents": []}},
    ]
    if sidebar:
        contents.append({
            "itemSectionRenderer": {
                "targetId": "watch-next-feed",
                "contents": [{"videoWithContextRenderer": {"videoId": "related1"}}],
            }
        })

    body: dict[str, Any] = {"expandableVideoDescriptionBodyRenderer": description_body or {}}

    response: dict[str, Any] = {
        "contents": {
            "singleColumnWatchNextResults": {
                "results": {"results": {"contents": contents}},
            }
        },
        "engagementPanels": [
            {"engagementPanelSectionListRenderer": {
                "content": {
                    "structuredDescriptionContentRenderer": {
                        "items": [
                            {"videoDescriptionHeaderRenderer": {"title": "Title"}},
                            body,
                        ]
                    }
                }
            }},
        ],
        "currentVideoEndpoint": {"watchEndpoint": {}},
    }
    if video_id is not None:
        response["currentVideoEndpoint"]["watchEndpoint"]["videoId"] = video_id
    return response


class ScriptedAdapter(SourceAdapter):
    """Adapter returning (or raising) a fixed result and recording calls."""

    def __init__(self, name: str, result: Any = None):
        self._name = name
        self.result = result if result is not None else {}
        self.calls: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return self._name

    def fetch(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(payload)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result
