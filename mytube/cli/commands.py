"""Closed set of menu commands."""

from __future__ import annotations

from enum import IntEnum


class Command(IntEnum):
    SHOW_MENU = 0
    REGISTER = 1
    LOGIN = 2
    LOGOUT = 3
    CREATE_CHANNEL = 4
    UPLOAD = 5
    SUBSCRIBE = 6
    WATCH = 7
    ADD_COMMENT = 8
    LIKE_COMMENT = 9
    LIST_COMMENTS = 10
    SEARCH = 11
    CREATE_PLAYLIST = 12
    ADD_TO_PLAYLIST = 13
    PLAY_PLAYLIST = 14
    LIST_VIDEOS = 15
    LIST_UPLOADS = 16
    TOGGLE_PERF = 17
    BENCHMARK = 18
    PAUSE = 19
    UNSUBSCRIBE = 20
    REMOVE_COMMENT = 21
    PROFILE = 22
    LIST_CHANNELS = 23
    EXIT = 99


MENU_LABELS: dict[Command, str] = {
    Command.SHOW_MENU: "Show menu",
    Command.REGISTER: "Register",
    Command.LOGIN: "Login",
    Command.LOGOUT: "Logout",
    Command.CREATE_CHANNEL: "Create channel (must be logged in)",
    Command.UPLOAD: "Upload video to your channel (logged in)",
    Command.SUBSCRIBE: "Subscribe to channel (logged in)",
    Command.WATCH: "Watch video by id",
    Command.ADD_COMMENT: "Add comment to video (logged in)",
    Command.LIKE_COMMENT: "Like comment on video (logged in)",
    Command.LIST_COMMENTS: "List comments on video",
    Command.SEARCH: "Search videos by title",
    Command.CREATE_PLAYLIST: "Create playlist (logged in)",
    Command.ADD_TO_PLAYLIST: "Add video to playlist (logged in)",
    Command.PLAY_PLAYLIST: "Play playlist (logged in)",
    Command.LIST_VIDEOS: "List all videos",
    Command.LIST_UPLOADS: "List channel uploads",
    Command.TOGGLE_PERF: "Toggle performance logging",
    Command.BENCHMARK: "Run performance benchmark",
    Command.PAUSE: "Pause video by id",
    Command.UNSUBSCRIBE: "Unsubscribe from channel (logged in)",
    Command.REMOVE_COMMENT: "Remove comment from video (logged in)",
    Command.PROFILE: "Show your profile (logged in)",
    Command.LIST_CHANNELS: "List channels",
    Command.EXIT: "Exit",
}

LOGIN_REQUIRED: frozenset[Command] = frozenset(
    {
        Command.CREATE_CHANNEL,
        Command.UPLOAD,
        Command.SUBSCRIBE,
        Command.ADD_COMMENT,
        Command.LIKE_COMMENT,
        Command.CREATE_PLAYLIST,
        Command.ADD_TO_PLAYLIST,
        Command.PLAY_PLAYLIST,
        Command.UNSUBSCRIBE,
        Command.REMOVE_COMMENT,
        Command.PROFILE,
    }
)


def parse_command(raw: str) -> Command | None:
    """Map typed input to a command; unknown or non-numeric input yields None."""

    try:
        return Command(int(raw.strip()))
    except ValueError:
        return None
