# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for fixed-status responders and redirects.
"""

import pytest
from http import HTTPStatus

from common_api import responses


class TestStatusResponders:
    """Test fixed-status views."""

    @pytest.fixture(autouse=True)
    def routes(self, app):
        """Register one route per responder."""
        for index, view in enumerate([
            responses.HTTP200, responses.HTTP201, responses.HTTP401,
            responses.HTTP404, responses.HTTP501, responses.OK, responses.CREATED,
            responses.UNAUTHORIZED, responses.NOT_FOUND, responses.NOT_IMPLEMENTED
        ]):
            app.add_url_rule(f'/test{index + 1}', endpoint=f'test{index + 1}', view_func=view)

    @pytest.mark.parametrize("path, code", [
        ('/test1', 200), ('/test2', 201), ('/test3', 401), ('/test4', 404), ('/test5', 501),
        ('/test6', 200), ('/test7', 201), ('/test8', 401), ('/test9', 404), ('/test10', 501)
    ])
    def test_status_sent(self, client, path, code):
        """Test each responder sends its status with an empty body."""
        response = client.get(path)

        assert response.status_code == code
        assert response.data == b""

    def test_every_standard_status_exported(self):
        """Test every HTTPStatus member, aliases included, has both exports."""
        for name, status in HTTPStatus.__members__.items():
            assert callable(getattr(responses, f"HTTP{status.value}"))
            assert callable(getattr(responses, name))

    def test_alias_names_exported(self):
        """Test names that are enum aliases on newer interpreters."""
        assert responses.UNPROCESSABLE_ENTITY().status_code == 422
        assert responses.REQUEST_ENTITY_TOO_LARGE().status_code == 413
        assert responses.UNPROCESSABLE_ENTITY.__name__ == "UNPROCESSABLE_ENTITY"

    def test_alias_delegates_to_numeric_responder(self):
        """Test named responders answer like their numeric counterpart."""
        assert responses.NOT_FOUND().status_code == 404
        assert responses.IM_A_TEAPOT().status_code == 418

    def test_responder_ignores_view_arguments(self):
        """Test path parameters passed to a responder are ignored."""
        assert responses.HTTP204(id=7).status_code == 204

    def test_status_responder_is_cached(self):
        """Test responders are built once per status code."""
        assert responses.status_responder(200) is responses.HTTP200


class TestRedirect:
    """Test redirect views."""

    @pytest.fixture(autouse=True)
    def routes(self, app):
        """Register redirects for every status combination."""
        app.add_url_rule('/redirect/1', view_func=responses.redirect('https://google.com'))
        app.add_url_rule('/redirect/2', view_func=responses.redirect('https://google.com', False, True))
        app.add_url_rule('/redirect/3', view_func=responses.redirect('https://google.com', True, False))
        app.add_url_rule('/redirect/4', view_func=responses.redirect('https://google.com', True, True))

    @pytest.mark.parametrize("path, code", [
        ('/redirect/1', 307),
        ('/redirect/2', 303),
        ('/redirect/3', 308),
        ('/redirect/4', 301)
    ])
    def test_redirect(self, client, path, code):
        """Test redirect status and Location header."""
        response = client.get(path)

        assert response.status_code == code
        assert response.headers["Location"] == "https://google.com"

    def test_same_status_redirects_without_endpoint(self, app, client):
        """Test two redirects with the same status register side by side."""
        app.add_url_rule('/old-a', view_func=responses.redirect('/a'))
        app.add_url_rule('/old-b', view_func=responses.redirect('/b'))

        first = client.get('/old-a')
        second = client.get('/old-b')

        assert first.status_code == 307
        assert first.headers["Location"] == "/a"
        assert second.status_code == 307
        assert second.headers["Location"] == "/b"

    def test_redirect_views_named_uniquely(self):
        """Test each redirect view gets a distinct name."""
        first = responses.redirect('/a')
        second = responses.redirect('/a')

        assert first.__name__ != second.__name__
        assert first.__name__.startswith("redirect_307_")

    @pytest.mark.parametrize("permanent, method_change, code", [
        (False, False, 307),
        (False, True, 303),
        (True, False, 308),
        (True, True, 301)
    ])
    def test_redirect_status(self, permanent, method_change, code):
        """Test status selection from the permanent and method-change flags."""
        assert responses.redirect_status(permanent, method_change) == code
