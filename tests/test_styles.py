import pytest

from geoserver_rest import UnauthorizedError, UnknownResponseError
from geoserver_rest.models import Style, style_content_type


@pytest.mark.parametrize(
    "fmt,version,expected",
    [
        ("sld", "1.0.0", "application/vnd.ogc.sld+xml"),
        ("sld", "1.1.0", "application/vnd.ogc.se+xml"),
        ("sld", None, "application/vnd.ogc.se+xml"),
        ("css", None, "application/vnd.geoserver.geocss+css"),
        ("yaml", None, "application/vnd.geoserver.ysld+yaml"),
        ("json", None, "application/vnd.geoserver.mbstyle+json"),
        ("zip", None, "application/vnd.ogc.sld+xml"),
        (None, None, "application/vnd.ogc.sld+xml"),
    ],
)
def test_style_content_type(fmt, version, expected):
    assert style_content_type(fmt, version) == expected


def test_get_style_metadata(client, geoserver):
    geoserver.add(
        "GET",
        "/workspaces/sf/styles/roads",
        body="<style><name>roads</name><format>sld</format>"
        "<languageVersion><version>1.0.0</version></languageVersion><filename>roads.sld</filename></style>",
    )

    style = client.get_style("sf", "roads")

    assert style.language_version == "1.0.0"
    assert style.filename == "roads.sld"


def test_get_style_file_sends_style_mime_type(client, geoserver):
    geoserver.add("GET", "/styles/roads", body="<StyledLayerDescriptor/>")

    body = client.get_style_file(None, "roads", "sld", "1.1.0")

    assert body == "<StyledLayerDescriptor/>"
    assert geoserver.last.headers["Accept"] == "application/vnd.ogc.se+xml"
    assert geoserver.last.headers["Content-Type"] == "application/vnd.ogc.se+xml"


def test_create_style_metadata(client, geoserver):
    geoserver.add("POST", "/styles", 201)

    client.create_style(None, Style(name="roads", filename="roads.sld"))

    assert geoserver.last.content == b"<style><name>roads</name><filename>roads.sld</filename></style>"
    assert geoserver.last.headers["Content-Type"] == "application/xml"


def test_upload_style_body(client, geoserver):
    geoserver.add("POST", "/workspaces/sf/styles", 201)

    client.upload_style("sf", Style(name="roads", format="css"), "* { stroke: black; }")

    assert geoserver.last.headers["Content-Type"] == "application/vnd.geoserver.geocss+css"
    assert geoserver.last.content == b"* { stroke: black; }"


def test_upload_style_only_maps_unauthorized(client, geoserver):
    geoserver.add("POST", "/styles", 401)
    with pytest.raises(UnauthorizedError):
        client.upload_style(None, Style(name="roads", format="sld"), "<sld/>")

    geoserver.add("POST", "/styles", 404)
    with pytest.raises(UnknownResponseError):
        client.upload_style(None, Style(name="roads", format="sld"), "<sld/>")


def test_update_style_content_puts_to_item(client, geoserver):
    geoserver.add("PUT", "/styles/roads", 200)

    client.update_style_content(None, Style(name="roads", format="yaml"), "name: roads")

    assert geoserver.last.headers["Content-Type"] == "application/vnd.geoserver.ysld+yaml"


def test_update_style_content_rejects_201(client, geoserver):
    geoserver.add("PUT", "/styles/roads", 201)

    with pytest.raises(UnknownResponseError):
        client.update_style_content(None, Style(name="roads", format="sld", language_version="1.0.0"), "<sld/>")


def test_delete_style_flags(client, geoserver):
    geoserver.add("DELETE", "/workspaces/sf/styles/roads", 200)

    client.delete_style("sf", "roads", purge=True)

    params = geoserver.last.url.params
    assert params["purge"] == "true"
    assert params["recurse"] == "false"
