"""Interactive text menu over the MyTube services."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO

from mytube.cli.commands import LOGIN_REQUIRED, MENU_LABELS, Command, parse_command
from mytube.cli.prompts import Prompter
from mytube.cli.render import render
from mytube.core.config import Settings, settings as default_settings
from mytube.core.errors import MyTubeError
from mytube.core.log import perf_switch
from mytube.core.results import OperationResult
from mytube.db.models import User
from mytube.db.store import Store
from mytube.services import (
    benchmark,
    channel_registry,
    playlist_service,
    search_service,
    subscription_service,
    user_service,
    video_service,
)

logger = logging.getLogger(__name__)


class MenuSession:
    """Console session; owns the current-user pointer the services never see."""

    def __init__(
        self,
        store: Store,
        *,
        stdin: TextIO,
        stdout: TextIO,
        settings: Settings | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or default_settings
        self.prompter = Prompter(stdin, stdout)
        self.stdout = stdout
        self.current: User | None = None
        self.running = True
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.SHOW_MENU: self.show_menu,
            Command.REGISTER: self._register,
            Command.LOGIN: self._login,
            Command.LOGOUT: self._logout,
            Command.CREATE_CHANNEL: self._create_channel,
            Command.UPLOAD: self._upload,
            Command.SUBSCRIBE: self._subscribe,
            Command.WATCH: self._watch,
            Command.ADD_COMMENT: self._add_comment,
            Command.LIKE_COMMENT: self._like_comment,
            Command.LIST_COMMENTS: self._list_comments,
            Command.SEARCH: self._search,
            Command.CREATE_PLAYLIST: self._create_playlist,
            Command.ADD_TO_PLAYLIST: self._add_to_playlist,
            Command.PLAY_PLAYLIST: self._play_playlist,
            Command.LIST_VIDEOS: self._list_videos,
            Command.LIST_UPLOADS: self._list_uploads,
            Command.TOGGLE_PERF: self._toggle_perf,
            Command.BENCHMARK: self._benchmark,
            Command.PAUSE: self._pause,
            Command.UNSUBSCRIBE: self._unsubscribe,
            Command.REMOVE_COMMENT: self._remove_comment,
            Command.PROFILE: self._profile,
            Command.LIST_CHANNELS: self._list_channels,
            Command.EXIT: self._exit,
        }

    def say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def report(self, result: OperationResult) -> None:
        self.say(result.message)

    def dispatch(self, command: Command) -> None:
        if command in LOGIN_REQUIRED and self.current is None:
            self.report(OperationResult.not_logged_in())
            return
        self._handlers[command]()

    def run(self) -> None:
        """Prompt for commands until EXIT or end of input."""

        self.show_menu()
        while self.running:
            raw = self.prompter.read_line("\nAction> ")
            if self.prompter.exhausted:
                break
            if not raw.strip():
                continue
            command = parse_command(raw)
            if command is None:
                self.say("Unknown command")
                continue
            self.dispatch(command)

    @property
    def user(self) -> User:
        if self.current is None:
            raise MyTubeError("No user is logged in")
        return self.current

    def _read_video_id(self, prompt: str) -> int | None:
        video_id = self.prompter.read_int(prompt)
        if video_id is None or self.store.find_video(video_id) is None:
            self.say("Video not found")
            return None
        return video_id

    def show_menu(self) -> None:
        self.say(render("menu", title=self.settings.menu_title, labels=MENU_LABELS))

    def _register(self) -> None:
        self.report(user_service.register_user(self.store, self.prompter.read_line("Choose username: ")))

    def _login(self) -> None:
        result, user = user_service.login(self.store, self.prompter.read_line("Username: "))
        if user is not None:
            self.current = user
        self.report(result)

    def _logout(self) -> None:
        if self.current is None:
            self.report(OperationResult.not_logged_in("Not logged in"))
            return
        self.say(f"Logged out {self.current.username}")
        self.current = None

    def _create_channel(self) -> None:
        name = self.prompter.read_line("Channel name: ")
        if not name.strip():
            self.say("Empty name")
            return
        if self.store.find_channel(name.strip()) is not None:
            self.say("Channel exists")
            return
        description = self.prompter.read_line("Description: ")
        self.report(channel_registry.create_channel(self.store, name, self.user.username, description))

    def _upload(self) -> None:
        name = self.prompter.read_line("Your channel name: ")
        channel = self.store.find_channel(name)
        if channel is None:
            self.say("Channel not found")
            return
        if channel.owner != self.user.username:
            self.say("You do not own this channel")
            return
        title = self.prompter.read_line("Video title: ")
        duration = self.prompter.read_int("Duration seconds: ")
        result = channel_registry.upload_video(
            self.store,
            name,
            requester=self.user.username,
            title=title,
            duration=duration if duration is not None else 0,
        )
        self.report(result)

    def _subscribe(self) -> None:
        name = self.prompter.read_line("Channel name to subscribe: ")
        self.report(subscription_service.subscribe(self.store, self.user, name))

    def _unsubscribe(self) -> None:
        name = self.prompter.read_line("Channel name to unsubscribe: ")
        self.report(subscription_service.unsubscribe(self.store, self.user, name))

    def _watch(self) -> None:
        video_id = self._read_video_id("Video id to watch: ")
        if video_id is not None:
            self.report(video_service.watch(self.store, video_id, user=self.current))

    def _pause(self) -> None:
        video_id = self._read_video_id("Video id to pause: ")
        if video_id is not None:
            self.report(video_service.pause(self.store, video_id))

    def _add_comment(self) -> None:
        video_id = self._read_video_id("Video id to comment on: ")
        if video_id is None:
            return
        text = self.prompter.read_line("Comment text: ")
        self.report(video_service.add_comment(self.store, self.user, video_id, text))

    def _like_comment(self) -> None:
        video_id = self._read_video_id("Video id: ")
        if video_id is None:
            return
        comment_id = self.prompter.read_int("Comment id to like: ")
        if comment_id is None:
            self.say("Comment not found")
            return
        self.report(video_service.like_comment(self.store, self.user, video_id, comment_id))

    def _remove_comment(self) -> None:
        video_id = self._read_video_id("Video id: ")
        if video_id is None:
            return
        comment_id = self.prompter.read_int("Comment id to remove: ")
        if comment_id is None:
            self.say("Comment not found")
            return
        self.report(video_service.remove_comment(self.store, self.user, video_id, comment_id))

    def _list_comments(self) -> None:
        video_id = self._read_video_id("Video id to list comments: ")
        if video_id is None:
            return
        comments = video_service.list_comments(self.store, video_id)
        self.say(render("comments", title=self.store.videos[video_id].title, comments=comments))

    def _search(self) -> None:
        query = self.prompter.read_line("Search keyword: ")
        self.say(render("search", hits=search_service.search(self.store, query)))

    def _create_playlist(self) -> None:
        name = self.prompter.read_line("Playlist name: ")
        self.report(playlist_service.create_playlist(self.user, name))

    def _add_to_playlist(self) -> None:
        name = self.prompter.read_line("Playlist name: ")
        if self.user.get_playlist(name) is None:
            self.say("Playlist not found")
            return
        video_id = self._read_video_id("Video id to add: ")
        if video_id is not None:
            self.report(playlist_service.add_to_playlist(self.store, self.user, name, video_id))

    def _play_playlist(self) -> None:
        name = self.prompter.read_line("Playlist name: ")
        playlist = self.user.get_playlist(name)
        if playlist is None:
            self.say("Playlist not found")
            return
        self.say(render("playlist", playlist=playlist_service.show_playlist(playlist, self.store.videos)))
        self.report(playlist_service.play_playlist(self.store, self.user, name))

    def _list_videos(self) -> None:
        self.say(render("videos", videos=video_service.list_all_videos(self.store)))

    def _list_uploads(self) -> None:
        name = self.prompter.read_line("Channel name: ")
        uploads = channel_registry.list_channel_uploads(self.store, name)
        if uploads is None:
            self.say("Channel not found")
            return
        self.say(render("uploads", uploads=uploads))

    def _list_channels(self) -> None:
        self.say(render("channels", channels=channel_registry.list_channels(self.store)))

    def _profile(self) -> None:
        self.say(render("profile", profile=user_service.user_profile(self.user)))

    def _toggle_perf(self) -> None:
        enabled = perf_switch.toggle()
        self.say(f"Performance logging {'ENABLED' if enabled else 'DISABLED'}")

    def _benchmark(self) -> None:
        report = benchmark.run_benchmark(self.store, self.settings)
        logger.debug("Benchmark report: %s", report.model_dump())
        self.say(render("benchmark", report=report))

    def _exit(self) -> None:
        self.say("Goodbye")
        self.running = False
