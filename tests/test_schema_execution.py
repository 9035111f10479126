import asyncio

import pytest
import strawberry
from graphql import GraphQLSchema, graphql
from strawberry.schema.config import StrawberryConfig

from fluentql import DuplicateTypeError, InputType, ObjectType, Schema, SchemaError


def _build_schema(users, strawberry_config=None):
    post_type = (
        ObjectType('Post', strawberry_config=strawberry_config)
        .field('id', strawberry.ID, True)
        .field('title', str)
        .end()
    )

    def resolve_posts(user, info, max_count=None):
        posts = user['posts']
        return posts if max_count is None else posts[:max_count]

    user_type = (
        ObjectType('User', strawberry_config=strawberry_config)
        .field('id', strawberry.ID, True)
        .field('full_name', str)
        .resolve('posts', [post_type], True)
            .resolve(resolve_posts)
            .arg('max_count', int)
        .end()
        .end()
    )

    async def resolve_user(root, info, id):
        await asyncio.sleep(0)
        return next((u for u in users if u['id'] == id), None)

    def resolve_users(root, info, ids=None):
        return [u for u in users if ids is None or u['id'] in ids]

    def resolve_rename(root, info, input):
        user = next(u for u in users if u['id'] == input['user_id'])
        user['full_name'] = input['full_name']
        return user

    rename_input = (
        InputType('RenameUserInput', strawberry_config=strawberry_config)
        .field('user_id', strawberry.ID, True)
        .field('full_name', str, True)
        .end()
    )

    return (
        Schema(strawberry_config=strawberry_config)
        .query()
            .resolve('user', user_type)
                .resolve(resolve_user)
                .arg('id', strawberry.ID, True)
            .end()
            .resolve('users', [user_type], True)
                .resolve(resolve_users)
                .arg('ids', [strawberry.ID])
            .end()
        .end()
        .mutation()
            .resolve('rename_user', user_type)
                .resolve(resolve_rename)
                .arg('input', rename_input, True)
            .end()
        .end()
        .end()
    )


def test_schema_builds_graphql_schema(users):
    schema = _build_schema(users)
    assert isinstance(schema, GraphQLSchema)
    assert schema.query_type.name == 'Query'
    assert schema.mutation_type.name == 'Mutation'
    assert schema.get_type('RenameUserInput') is not None


@pytest.mark.asyncio
async def test_query_with_args_and_async_resolver(users):
    schema = _build_schema(users)
    q = """
    query {
      user(id: "1") {
        id
        full_name
        posts(max_count: 1) { id title }
      }
    }
    """
    res = await graphql(schema, q)
    assert res.errors is None, res.errors
    assert res.data == {'user': {'id': '1', 'full_name': 'Ada Lovelace', 'posts': [{'id': '10', 'title': 'Notes'}]}}


@pytest.mark.asyncio
async def test_list_argument(users):
    schema = _build_schema(users)
    res = await graphql(schema, 'query { users(ids: ["2"]) { id } }')
    assert res.errors is None, res.errors
    assert res.data == {'users': [{'id': '2'}]}


@pytest.mark.asyncio
async def test_required_argument_is_enforced(users):
    schema = _build_schema(users)
    res = await graphql(schema, 'query { user { id } }')
    assert res.errors is not None
    assert any('is required' in e.message and 'id' in e.message for e in res.errors), res.errors


@pytest.mark.asyncio
async def test_mutation_with_input_type(users):
    schema = _build_schema(users)
    m = """
    mutation($input: RenameUserInput!) {
      rename_user(input: $input) { id full_name }
    }
    """
    res = await graphql(schema, m, variable_values={'input': {'user_id': '2', 'full_name': 'A. M. Turing'}})
    assert res.errors is None, res.errors
    assert res.data == {'rename_user': {'id': '2', 'full_name': 'A. M. Turing'}}


@pytest.mark.asyncio
async def test_camel_case_schema(users):
    schema = _build_schema(users, strawberry_config=StrawberryConfig(auto_camel_case=True))
    q = """
    query {
      user(id: "1") { fullName posts(maxCount: 2) { title } }
    }
    """
    res = await graphql(schema, q)
    assert res.errors is None, res.errors
    assert res.data['user']['fullName'] == 'Ada Lovelace'
    assert [p['title'] for p in res.data['user']['posts']] == ['Notes', 'Engines']

    m = """
    mutation {
      renameUser(input: {userId: "1", fullName: "Countess Lovelace"}) { fullName }
    }
    """
    res = await graphql(schema, m)
    assert res.errors is None, res.errors
    assert res.data == {'renameUser': {'fullName': 'Countess Lovelace'}}


def test_schema_requires_query():
    with pytest.raises(SchemaError):
        Schema().end()


def test_schema_root_opened_but_not_ended():
    s = Schema()
    s.query().field('ok', bool)
    with pytest.raises(SchemaError, match='never ended'):
        s.end()


def test_schema_root_declared_twice():
    s = Schema().query().field('ok', bool).end()
    with pytest.raises(DuplicateTypeError):
        s.query()


def test_schema_with_query_only():
    schema = Schema().query('RootQuery').field('ok', bool).end().end()
    assert schema.query_type.name == 'RootQuery'
    assert schema.mutation_type is None
