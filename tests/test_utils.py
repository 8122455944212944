import uuid

import pytest

from git_storage import InvalidArgumentError, generate_uuid, path_from_download_url

DNS_NAMESPACE = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://raw.githubusercontent.com/OWNER/REPO/main/folder/file.txt", "folder/file.txt"),
        (
            "https://raw.githubusercontent.com/OWNER/REPO/main/folder/file.txt?token=XYZ",
            "folder/file.txt",
        ),
        ("https://raw.githubusercontent.com/OWNER/REPO/dev/a/b/c.jpg", "a/b/c.jpg"),
        ("https://raw.githubusercontent.com/OTHER/REPO/main/folder/file.txt", None),
        ("https://raw.githubusercontent.com/OWNER/OTHER/main/folder/file.txt", None),
        ("https://example.com/OWNER/REPO/main/folder/file.txt", None),
    ],
)
def test_path_from_download_url(url, expected):
    assert path_from_download_url(url, "OWNER", "REPO") == expected


def test_path_from_download_url_escapes_repo_name():
    url = "https://raw.githubusercontent.com/me/v1x3/main/a.txt"
    assert path_from_download_url(url, "me", "v1.3") is None


@pytest.mark.parametrize("version,expected", [("v1", 1), ("v4", 4)])
def test_generate_random_uuid(version, expected):
    assert uuid.UUID(generate_uuid(version)).version == expected


def test_generate_name_based_uuid():
    assert generate_uuid("v3", "name-string", DNS_NAMESPACE) == str(
        uuid.uuid3(uuid.NAMESPACE_DNS, "name-string")
    )
    assert generate_uuid("v5", "name-string", DNS_NAMESPACE) == str(
        uuid.uuid5(uuid.NAMESPACE_DNS, "name-string")
    )


@pytest.mark.parametrize(
    "args",
    [
        ("v3",),
        ("v5", "name"),
        ("v5", None, DNS_NAMESPACE),
        ("v3", "name", "not-a-uuid"),
        ("v2",),
    ],
)
def test_generate_uuid_invalid_arguments(args):
    with pytest.raises(InvalidArgumentError):
        generate_uuid(*args)
