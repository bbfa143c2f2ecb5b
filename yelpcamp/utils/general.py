# yelpcamp/utils/general.py
"""
General-purpose request helpers.

This module contains the HTTP method override middleware, the parser for
bracketed form field names (``campground[title]``) and the redirect
target check used after login.
"""

from urllib.parse import parse_qs, urlparse

OVERRIDABLE_METHODS = {'PUT', 'PATCH', 'DELETE'}


class MethodOverrideMiddleware:
    """
    WSGI middleware that lets an HTML form POST stand in for PUT, PATCH or
    DELETE by naming the verb in the query string: ``?_method=DELETE``.
    Only POST requests are rewritten.
    """
    def __init__(self, app, param='_method'):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = (query.get(self.param) or [''])[0].upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)


def form_group(form, prefix):
    """
    Collects ``prefix[key]`` fields of a submitted form into a plain dict.

    ``{'campground[title]': 'Hidden Lake', 'other': 'x'}`` with prefix
    ``'campground'`` gives ``{'title': 'Hidden Lake'}``. Repeated fields named
    ``prefix[key][]`` are returned as lists.
    """
    group = {}
    opening = f'{prefix}['
    for name in form.keys():
        if not name.startswith(opening):
            continue
        inner = name[len(opening):]
        if inner.endswith('][]'):
            group[inner[:-3]] = form.getlist(name)
        elif inner.endswith(']') and '[' not in inner[:-1] and ']' not in inner[:-1]:
            group[inner[:-1]] = form.get(name)
    return group


def is_safe_redirect(target):
    """Only local, path-only targets may be used after login."""
    # Browsers read '\' as '/', so '/\evil.com' would leave the site.
    if not target or '\\' in target:
        return False
    parsed = urlparse(target)
    return not parsed.scheme and not parsed.netloc and target.startswith('/') and not target.startswith('//')
