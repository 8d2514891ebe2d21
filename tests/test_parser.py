"""Tests for repo url normalization and parsing."""

import pytest

from repo_cloner.parser import (
    MalformedReference,
    Scheme,
    normalize_url,
    parse_reference,
    read_references,
)


def test_https_to_ssh():
    url = normalize_url("https://github.com/o/r.git", Scheme.SSH)
    assert url == "git@github.com:o/r.git"


def test_ssh_to_https():
    url = normalize_url("git@github.com:o/r.git", Scheme.HTTPS)
    assert url == "https://github.com/o/r.git"


def test_https_stays_https():
    assert normalize_url("https://github.com/o/r.git", Scheme.HTTPS) == (
        "https://github.com/o/r.git"
    )
    assert normalize_url("https://github.com/o/r", Scheme.HTTPS) == (
        "https://github.com/o/r"
    )


@pytest.mark.parametrize("scheme", list(Scheme))
@pytest.mark.parametrize(
    "reference",
    [
        "https://github.com/octocat/hello-world.git",
        "git@github.com:octocat/hello-world",
    ],
)
def test_normalize_is_idempotent(reference, scheme):
    once = normalize_url(reference, scheme)
    assert normalize_url(once, scheme) == once


def test_unknown_forms_pass_through():
    for reference in [
        "ssh://git@gitlab.com/group/project.git",
        "https://gitlab.com/group/project",
        "notaurl",
    ]:
        assert normalize_url(reference, Scheme.SSH) == reference


def test_custom_host():
    url = normalize_url("https://git.example.org/team/tool", Scheme.SSH, "git.example.org")
    assert url == "git@git.example.org:team/tool"


def test_parse_ssh_reference():
    repo = parse_reference("git@github.com:octocat/hello-world.git", Scheme.SSH)
    assert repo.owner == "octocat"
    assert repo.name == "hello-world"
    assert repo.label == "octocat-hello-world"
    assert repo.url == "git@github.com:octocat/hello-world.git"
    assert str(repo) == "octocat/hello-world"


def test_parse_normalizes_first():
    repo = parse_reference("https://github.com/octocat/hello-world", Scheme.SSH)
    assert repo.url == "git@github.com:octocat/hello-world"
    assert (repo.owner, repo.name) == ("octocat", "hello-world")


def test_parse_trailing_slash():
    repo = parse_reference("https://github.com/octocat/hello-world/", Scheme.HTTPS)
    assert (repo.owner, repo.name) == ("octocat", "hello-world")


def test_parse_unrecognized_url_keeps_it():
    repo = parse_reference("ssh://git@gitlab.com/group/project.git", Scheme.HTTPS)
    assert repo.url == "ssh://git@gitlab.com/group/project.git"
    assert (repo.owner, repo.name) == ("group", "project")


def test_parse_bare_owner_repo():
    repo = parse_reference("octocat/hello-world", Scheme.SSH)
    assert repo.url == "octocat/hello-world"
    assert repo.label == "octocat-hello-world"


@pytest.mark.parametrize("reference", ["notaurl", "/hello-world", "octocat/", "o/.git"])
def test_malformed(reference):
    with pytest.raises(MalformedReference) as exc_info:
        parse_reference(reference, Scheme.SSH)
    assert exc_info.value.reference == reference


def test_read_references_skips_blank_and_comments():
    lines = ["", "  ", "# comment", "   # indented", "  a/b  ", "c/d\n"]
    assert list(read_references(lines)) == ["a/b", "c/d"]
