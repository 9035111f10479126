"""Shared fixtures for FluentQL tests."""
import pytest
from graphql import GraphQLID, GraphQLInt


USERS = [
    {'id': '1', 'full_name': 'Ada Lovelace', 'posts': [{'id': '10', 'title': 'Notes'}, {'id': '11', 'title': 'Engines'}]},
    {'id': '2', 'full_name': 'Alan Turing', 'posts': [{'id': '20', 'title': 'Computable numbers'}]},
]


@pytest.fixture
def users():
    return [dict(u) for u in USERS]


@pytest.fixture
def fn():
    def resolve_thing(root, info, **kwargs):
        return kwargs
    return resolve_thing


@pytest.fixture
def id_type():
    return GraphQLID


@pytest.fixture
def int_type():
    return GraphQLInt
