"""
Template endpoint tests
"""
import json

from storefront_admin import db
from storefront_admin.models import Template

BASE_URL = '/api/dashboard/templates'


def template_body(**overrides):
    body = {
        'templateName': 'Vitrine',
        'templateImageIds': ['templates/vitrine_1', 'templates/vitrine_2'],
        'templateHasWeb': True,
        'templateHasMobile': True,
    }
    body.update(overrides)
    return body


class TestTemplates:
    """List and create"""

    def test_requires_login(self, client):
        assert client.post(BASE_URL, json=template_body()).status_code == 401

    def test_list(self, auth_client, template_factory):
        template_factory()
        template_factory(template_name='Vitrine')

        response = auth_client.get(BASE_URL)

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data['total'] == 2
        assert {t['template_name'] for t in data['templates']} == {'Boutique', 'Vitrine'}

    def test_create(self, auth_client):
        response = auth_client.post(BASE_URL, json=template_body(templateName=' Vitrine <b>Pro</b> '))

        assert response.status_code == 201
        data = json.loads(response.data)['template']
        assert data['template_name'] == 'Vitrine bProb'
        assert data['template_images'] == ['templates/vitrine_1', 'templates/vitrine_2']
        assert data['template_has_mobile'] is True

    def test_create_needs_a_platform(self, auth_client):
        response = auth_client.post(BASE_URL, json=template_body(templateHasWeb=False, templateHasMobile=0))

        assert response.status_code == 400
        assert 'platforms' in json.loads(response.data)['errors']

    def test_create_reserved_name(self, auth_client):
        response = auth_client.post(BASE_URL, json=template_body(templateName='default'))

        assert response.status_code == 400
        assert json.loads(response.data)['errors']['templateName'] == 'This template name is not allowed'


class TestUpdateTemplate:
    """PUT /templates/<id>"""

    def test_update_name_and_status(self, auth_client, test_template):
        template_id = test_template.template_id
        response = auth_client.put(f'{BASE_URL}/{template_id}', json={
            'templateName': 'Boutique Deluxe',
            'isActive': False,
        })

        assert response.status_code == 200
        template = db.session.get(Template, template_id)
        assert template.template_name == 'Boutique Deluxe'
        assert template.is_active is False

    def test_single_flag_checked_against_stored_one(self, auth_client, test_template):
        # stored: web only
        response = auth_client.put(f'{BASE_URL}/{test_template.template_id}', json={
            'templateHasWeb': False,
        })

        assert response.status_code == 400
        assert 'platforms' in json.loads(response.data)['errors']

    def test_replacing_images(self, auth_client, test_template):
        response = auth_client.put(f'{BASE_URL}/{test_template.template_id}', json={
            'templateImageIds': ['templates/new_1'],
        })

        assert response.status_code == 200
        assert json.loads(response.data)['imagesToDelete'] == ['templates/boutique_1']

    def test_update_missing(self, auth_client):
        response = auth_client.put(f'{BASE_URL}/9b2d7c1e-3a4f-4e5d-8c6b-1a2b3c4d5e6f',
                                   json={'isActive': True})
        assert response.status_code == 404


class TestDeleteTemplate:
    """DELETE /templates/<id>"""

    def test_delete_inactive(self, auth_client, template_factory):
        template = template_factory(is_active=False)
        template_id = template.template_id

        response = auth_client.delete(f'{BASE_URL}/{template_id}')

        assert response.status_code == 200
        assert db.session.get(Template, template_id) is None

    def test_delete_active_refused(self, auth_client, test_template):
        response = auth_client.delete(f'{BASE_URL}/{test_template.template_id}')
        assert response.status_code == 400

    def test_delete_used_template_conflicts(self, auth_client, application_factory, test_template):
        application_factory()
        test_template.is_active = False
        db.session.commit()

        response = auth_client.delete(f'{BASE_URL}/{test_template.template_id}')

        assert response.status_code == 409
        assert db.session.get(Template, test_template.template_id) is not None

    def test_delete_invalid_id(self, auth_client):
        assert auth_client.delete(f'{BASE_URL}/123').status_code == 400
