def test_home_page_renders_widget_and_scripts(client):
    response = client.get("/")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert '<input type="hidden" name="recaptcha_token" id="recaptcha_token">' in html
    assert "<script>jQuery(function ($) {" in html
    assert 'action: "homepage"' in html
    assert "//www.google.com/recaptcha/api.js?render=site-key-from-config" in html
    assert html.count("function initReCaptcha3()") == 1


def test_contact_form_uses_field_action(client):
    response = client.get("/contact")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'name="recaptcha_token"' in html
    assert 'action: "contact"' in html
    assert '"site-key-from-config"' in html


def test_contact_submission_redirects(client):
    response = client.post(
        "/contact",
        data={
            "full_name": "Ada",
            "email": "ada@example.com",
            "message": "Hello",
            "recaptcha_token": "token-from-grecaptcha",
        },
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/contact")


def test_contact_submission_requires_fields(client):
    response = client.post("/contact", data={"full_name": "Ada"})

    assert response.status_code == 400
    assert "All fields are required" in response.get_data(as_text=True)


def test_widget_renders_nothing_without_site_key(client, app):
    app.extensions["recaptcha"].site_key_v3 = None

    html = client.get("/").get_data(as_text=True)

    assert "recaptcha_token" not in html
    assert "<script>jQuery" not in html
