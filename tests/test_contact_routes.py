"""
Tests for the /api/contacts endpoints
"""
from unittest.mock import patch

from bson import ObjectId
from pymongo.errors import PyMongoError

import stayintouch


def create_contact(client, **data):
    data.setdefault('name', 'Jane')
    response = client.post('/api/contacts', json=data)
    assert response.status_code == 201
    return response.get_json()


def test_requires_authentication(anonymous_client):
    response = anonymous_client.get('/api/contacts')

    assert response.status_code == 401
    assert response.get_json() == {'message': 'Unauthorized'}


def test_index_empty(alice_client):
    response = alice_client.get('/api/contacts')

    assert response.status_code == 200
    assert response.get_json() == []


def test_index_only_returns_own_contacts(alice_client, bob_client):
    jane = create_contact(alice_client, name='Jane')
    create_contact(bob_client, name='Max')

    alice_ids = [c['_id'] for c in alice_client.get('/api/contacts').get_json()]
    bob_ids = [c['_id'] for c in bob_client.get('/api/contacts').get_json()]

    assert alice_ids == [jane['_id']]
    assert jane['_id'] not in bob_ids


def test_create_sets_user_to_requester(alice_client, alice, bob):
    body = create_contact(alice_client, name='Jane', user=bob.id)

    assert body['user'] == alice.id
    assert body['name'] == 'Jane'
    assert body['interactions'] == []


def test_create_validation_error_is_500(alice_client):
    response = alice_client.post('/api/contacts', json={'email': 'nameless@example.com'})

    assert response.status_code == 500
    assert response.get_json()['name'] == 'ContactValidationError'


def test_show(alice_client):
    jane = create_contact(alice_client, name='Jane')

    response = alice_client.get(f"/api/contacts/{jane['_id']}")

    assert response.status_code == 200
    assert response.get_json() == jane


def test_missing_contact_is_404_for_every_verb(alice_client, bob_client):
    missing = str(ObjectId())
    for client in (alice_client, bob_client):
        assert client.get(f'/api/contacts/{missing}').status_code == 404
        assert client.put(f'/api/contacts/{missing}', json={'name': 'x'}).status_code == 404
        assert client.delete(f'/api/contacts/{missing}').status_code == 404
        assert client.post(f'/api/contacts/{missing}/interactions', json={}).status_code == 404
        assert client.delete(f'/api/contacts/{missing}/interactions/{missing}').status_code == 404


def test_malformed_id_is_404(alice_client):
    response = alice_client.get('/api/contacts/not-an-id')

    assert response.status_code == 404
    assert response.data == b''


def test_other_users_contact_is_403_with_empty_body(alice_client, bob_client):
    jane = create_contact(alice_client, name='Jane')
    url = f"/api/contacts/{jane['_id']}"

    responses = [
        bob_client.get(url),
        bob_client.put(url, json={'name': 'Hijacked'}),
        bob_client.delete(url),
        bob_client.post(f'{url}/interactions', json={'type': 'call'}),
        bob_client.delete(f'{url}/interactions/{ObjectId()}'),
    ]

    for response in responses:
        assert response.status_code == 403
        assert response.data == b''
    unchanged = alice_client.get(url).get_json()
    assert unchanged['name'] == 'Jane'
    assert unchanged['interactions'] == []


def test_update_merges_fields(alice_client):
    jane = create_contact(
        alice_client, name='Jane', address={'city': 'Portland', 'state': 'OR'}, tags=['work']
    )

    response = alice_client.put(f"/api/contacts/{jane['_id']}", json={
        'address': {'city': 'Bend'},
        'tags': ['friends'],
        'company': 'Acme'
    })

    assert response.status_code == 200
    body = response.get_json()
    assert body['address'] == {'city': 'Bend', 'state': 'OR'}
    assert body['tags'] == ['friends']
    assert body['company'] == 'Acme'
    assert body['name'] == 'Jane'


def test_update_cannot_change_identifier_or_owner(alice_client, alice, bob):
    jane = create_contact(alice_client, name='Jane')

    response = alice_client.put(f"/api/contacts/{jane['_id']}", json={
        '_id': str(ObjectId()),
        'user': bob.id,
        'name': 'Jane Doe'
    })

    body = response.get_json()
    assert response.status_code == 200
    assert body['_id'] == jane['_id']
    assert body['user'] == alice.id
    assert body['name'] == 'Jane Doe'


def test_destroy(alice_client):
    jane = create_contact(alice_client, name='Jane')
    url = f"/api/contacts/{jane['_id']}"

    response = alice_client.delete(url)

    assert response.status_code == 204
    assert response.data == b''
    assert alice_client.get(url).status_code == 404


def test_add_then_remove_interaction(alice_client):
    jane = create_contact(alice_client, name='Jane')
    url = f"/api/contacts/{jane['_id']}/interactions"

    for kind in ('call', 'email', 'coffee'):
        response = alice_client.post(url, json={'type': kind, 'notes': f'{kind} notes'})
        assert response.status_code == 200
    interactions = response.get_json()['interactions']
    assert [i['type'] for i in interactions] == ['call', 'email', 'coffee']

    response = alice_client.delete(f"{url}/{interactions[1]['_id']}")

    assert response.status_code == 200
    remaining = response.get_json()['interactions']
    assert [i['_id'] for i in remaining] == [interactions[0]['_id'], interactions[2]['_id']]


def test_add_interaction_with_invalid_body_is_500(alice_client):
    jane = create_contact(alice_client, name='Jane')

    response = alice_client.post(
        f"/api/contacts/{jane['_id']}/interactions", json={'date': 'whenever'}
    )

    assert response.status_code == 500
    assert response.get_json()['name'] == 'ContactValidationError'


def test_store_failure_is_500_with_error_payload(alice_client):
    with patch.object(stayintouch.contact_service, 'list_for_user',
                      side_effect=PyMongoError('connection refused')):
        response = alice_client.get('/api/contacts')

    assert response.status_code == 500
    assert response.get_json() == {'name': 'PyMongoError', 'message': 'connection refused'}


def test_store_failure_during_lookup_is_500(alice_client):
    jane = create_contact(alice_client, name='Jane')

    with patch.object(stayintouch.contact_service, 'get_contact',
                      side_effect=PyMongoError('timed out')):
        response = alice_client.delete(f"/api/contacts/{jane['_id']}")

    assert response.status_code == 500
    assert alice_client.get(f"/api/contacts/{jane['_id']}").status_code == 200


def test_jane_scenario(alice_client, bob_client, alice):
    response = alice_client.post('/api/contacts', json={'name': 'Jane'})
    assert response.status_code == 201
    body = response.get_json()
    assert body['user'] == alice.id
    url = f"/api/contacts/{body['_id']}"

    assert bob_client.get(url).status_code == 403
    assert alice_client.delete(url).status_code == 204
    assert alice_client.get(url).status_code == 404


def test_update_without_body_leaves_contact_unchanged(alice_client):
    jane = create_contact(alice_client, name='Jane', company='Acme')

    response = alice_client.put(f"/api/contacts/{jane['_id']}")

    assert response.status_code == 200
    body = response.get_json()
    assert body['name'] == 'Jane'
    assert body['company'] == 'Acme'


def test_update_with_non_object_body_is_500(alice_client):
    jane = create_contact(alice_client, name='Jane')

    response = alice_client.put(f"/api/contacts/{jane['_id']}", json=['Jane Doe'])

    assert response.status_code == 500
    assert response.get_json()['name'] == 'ContactValidationError'


def test_add_interaction_without_body_appends_a_default_entry(alice_client):
    jane = create_contact(alice_client, name='Jane')

    response = alice_client.post(f"/api/contacts/{jane['_id']}/interactions")

    assert response.status_code == 200
    interactions = response.get_json()['interactions']
    assert len(interactions) == 1
    assert interactions[0]['_id']
    assert interactions[0]['date']


def test_update_rejects_duplicate_interaction_ids(alice_client):
    jane = create_contact(alice_client, name='Jane')
    url = f"/api/contacts/{jane['_id']}"
    shared_id = str(ObjectId())

    response = alice_client.put(url, json={'interactions': [
        {'_id': shared_id, 'type': 'call'},
        {'_id': shared_id, 'type': 'email'},
        {'type': 'coffee'},
    ]})

    assert response.status_code == 500
    assert response.get_json() == {
        'name': 'ContactValidationError', 'message': 'Interaction ids must be unique.'
    }
    assert alice_client.get(url).get_json()['interactions'] == []


def test_create_rejects_duplicate_interaction_ids(alice_client):
    shared_id = str(ObjectId())

    response = alice_client.post('/api/contacts', json={'name': 'Jane', 'interactions': [
        {'_id': shared_id, 'type': 'call'},
        {'_id': shared_id, 'type': 'email'},
    ]})

    assert response.status_code == 500
    assert response.get_json()['name'] == 'ContactValidationError'
    assert alice_client.get('/api/contacts').get_json() == []
