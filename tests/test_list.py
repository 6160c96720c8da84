from collections.abc import Callable

import pytest

from pms.app import Application
from pms.commands import ListCommand
from pms.commands.list import FETCH_LIMIT
from pms.errors import AuthenticationError, ExecError, NotImplementedCommandError, ParseError, RemoteError
from pms.input import Token, TokenClass, tokenize


def _feed(command: ListCommand, line: str) -> None:
    for token in tokenize(line):
        command.parse(token)


def _run(application: Application, line: str) -> ListCommand:
    command = ListCommand(application)
    _feed(command, line)
    command.exec()
    return command


def _active_id(application: Application) -> str | None:
    active = application.active_list
    return active.id if active is not None else None


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("down", "beta"),
        ("next", "beta"),
        ("end", "gamma"),
        ("3", "gamma"),
        ("2", "beta"),
    ],
)
def test_navigation_from_first_list(library: Application, line: str, expected: str) -> None:
    _run(library, line)
    assert _active_id(library) == expected


@pytest.mark.parametrize("line", ["up", "prev", "previous"])
def test_previous_list(library: Application, line: str) -> None:
    library.db.set_cursor(2)
    _run(library, line)
    assert _active_id(library) == "beta"


def test_home_returns_to_first_list(library: Application) -> None:
    library.db.set_cursor(2)
    _run(library, "home")
    assert _active_id(library) == "alpha"


def test_position_zero_changes_nothing(library: Application) -> None:
    command = _run(library, "0")
    assert command.absolute == -1
    assert _active_id(library) == "alpha"


def test_unknown_verb_is_rejected(library: Application) -> None:
    with pytest.raises(ParseError, match="position 'sideways' is not recognized, and is not a number"):
        _feed(ListCommand(library), "sideways")


def test_non_identifier_verb_is_rejected(library: Application) -> None:
    with pytest.raises(ParseError, match=r"unexpected '\|', expected identifier"):
        _feed(ListCommand(library), "|")


def test_missing_verb_is_rejected(library: Application) -> None:
    command = ListCommand(library)
    with pytest.raises(ParseError, match="unexpected 'END', expected identifier"):
        _feed(command, "")
    assert "goto" in command.tab_complete.candidates


def test_only_end_is_accepted_after_verb(library: Application) -> None:
    with pytest.raises(ParseError, match="Unknown input 'home', expected END"):
        _feed(ListCommand(library), "next home")


@pytest.mark.parametrize("verb", ["duplicate", "remove"])
def test_recognized_but_unsupported_verbs(library: Application, verb: str) -> None:
    with pytest.raises(NotImplementedCommandError, match=f"{verb} is not implemented"):
        _run(library, verb)


def test_goto_name_swallows_every_token(library: Application) -> None:
    command = ListCommand(library)
    _feed(command, 'goto te|st$x {"quoted name"}')
    assert command.target == "te|st$x{quoted name}"
    assert command.finished is True


def test_goto_requires_a_name(library: Application) -> None:
    command = ListCommand(library)
    with pytest.raises(ParseError, match="expected list name"):
        _feed(command, "goto")
    assert command.tab_complete.candidates == ("alpha", "beta", "gamma")


def test_goto_cached_list_never_touches_remote(offline: Callable[[], Application], make_list) -> None:
    application = offline()
    beta = make_list("beta", 4, name="Beta list")
    beta.set_cursor(3)
    application.db.add(beta)
    application.db.add(make_list("alpha", 2))

    _run(application, "goto beta")

    assert application.active_list is beta
    assert beta.name == "Beta list"
    assert beta.cursor == 3
    assert application.db.cursor == 0


def test_goto_wins_over_other_intents(library: Application) -> None:
    command = ListCommand(library)
    command.goto_ = True
    command.target = "gamma"
    command.relative = 1
    command.absolute = 0
    command.exec()
    assert _active_id(library) == "gamma"
    assert library.db.cursor == 2


def test_relative_move_starts_from_cached_goto(library: Application) -> None:
    _run(library, "goto gamma")
    _run(library, "prev")
    assert _active_id(library) == "beta"


def test_finished_goto_name_clears_completion(library: Application) -> None:
    command = ListCommand(library)
    _feed(command, "goto beta")
    assert command.finished is True
    assert command.tab_complete.partial == ""
    assert command.tab_complete.candidates == ()


def test_open_wins_over_relative_move(library: Application, remote) -> None:
    command = ListCommand(library)
    command.open = True
    command.relative = 1
    command.exec()
    assert ("get_playlist", "alpha-0") in remote.calls
    assert _active_id(library) == "alpha-0"


def test_goto_playlist_by_id(application: Application, remote) -> None:
    _run(application, "goto 37i9dQ")

    active = application.active_list
    assert active is not None
    assert active.id == "37i9dQ"
    assert active.name == "Road trip by alice"
    assert [row["id"] for row in active.rows] == ["t1", "t2"]
    assert active.visible_columns == ["artist", "title", "album", "year", "time"]
    assert active.cursor == 0
    assert ("get_playlist", "37i9dQ") in remote.calls
    assert ("get_playlist_tracks", FETCH_LIMIT) in remote.calls
    assert application.db.get("37i9dQ") is active


def test_goto_saved_tracks_applies_default_sort(application: Application, remote, make_track) -> None:
    remote.next_pages["page-2"] = {"items": [{"added_at": "2022-01-01", "track": make_track("s3", "Mango", "Alpha Band")}]}

    _run(application, "goto my-tracks")

    active = application.active_list
    assert active is not None
    assert active.name == "Saved tracks"
    assert [row["title"] for row in active.rows] == ["Apple", "Mango", "Zebra"]
    assert active.row(0) == active.cursor_row()
    assert ("current_users_tracks", FETCH_LIMIT) in remote.calls
    assert ("next_page", "page-2") in remote.calls


def test_goto_top_tracks_keeps_remote_order(application: Application) -> None:
    _run(application, "goto top-tracks")
    active = application.active_list
    assert active is not None
    assert active.name == "Top tracks"
    assert [row["title"] for row in active.rows] == ["Hit", "Other hit"]


def test_goto_my_playlists_shows_all_columns(application: Application) -> None:
    _run(application, "goto my-playlists")
    active = application.active_list
    assert active is not None
    assert active.name == "My playlists"
    assert active.visible_columns == active.column_names()
    assert "owner" in active.visible_columns


def test_goto_featured_playlists_uses_message_as_name(application: Application) -> None:
    _run(application, "goto featured-playlists")
    active = application.active_list
    assert active is not None
    assert active.name == "Monday picks"
    assert active.id == "featured-playlists"


def test_goto_devices(application: Application) -> None:
    _run(application, "goto devices")
    active = application.active_list
    assert active is not None
    assert active.name == "Devices"
    assert active.cursor_row() == {"id": "d1", "name": "Kitchen", "type": "Speaker", "active": "yes", "volume": "40"}


def test_cached_copy_survives_remote_failure(application: Application, remote) -> None:
    _run(application, "goto my-playlists")
    _run(application, "goto top-tracks")
    remote.fail_with = RemoteError("network down")

    _run(application, "goto my-playlists")

    assert _active_id(application) == "my-playlists"


def test_remote_failure_propagates(application: Application, remote) -> None:
    remote.fail_with = RemoteError("network down")
    with pytest.raises(RemoteError, match="network down"):
        _run(application, "goto my-tracks")
    assert application.active_list is None


def test_authentication_failure_propagates(settings) -> None:
    def _factory(_settings):
        raise AuthenticationError("not logged in")

    application = Application(settings, client_factory=_factory)
    with pytest.raises(AuthenticationError, match="not logged in"):
        _run(application, "goto my-tracks")


def test_open_follows_row_under_cursor(application: Application, remote) -> None:
    _run(application, "goto my-playlists")
    application.widget.set_cursor(1)

    _run(application, "open")

    assert ("get_playlist", "pl2") in remote.calls
    assert _active_id(application) == "pl2"


def test_open_without_selection_fails(library: Application) -> None:
    _run(library, "end")
    with pytest.raises(ExecError, match="no playlist selected"):
        _run(library, "open")


def test_verb_completion(library: Application) -> None:
    command = ListCommand(library)
    with pytest.raises(ParseError):
        _feed(command, "d")
    assert command.tab_complete.partial == "d"
    assert command.tab_complete.matches() == ["down", "duplicate"]


def test_goto_name_completion_uses_cached_keys(library: Application) -> None:
    command = ListCommand(library)
    for text in ("goto", "be"):
        command.parse(Token(TokenClass.IDENTIFIER, text))
    assert command.tab_complete.matches() == ["beta"]


def test_application_close_releases_remote_session(application: Application, remote) -> None:
    application.close()
    assert remote.closed is False

    _run(application, "goto devices")
    application.close()

    assert remote.closed is True
