# recaptcha3/views.py
from flask import Blueprint, render_template, current_app, request, flash, url_for, redirect
from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length

from recaptcha3 import limiter
from recaptcha3.config import Config
from recaptcha3.utils.fields import ReCaptcha3Field

home = Blueprint("home", __name__)


class ContactForm(FlaskForm):
    full_name = StringField("Name", validators=[DataRequired(), Length(max=100)])
    email = StringField("Email", validators=[DataRequired(), Length(max=254)])
    message = TextAreaField("Message", validators=[DataRequired(), Length(max=5000)])
    recaptcha_token = ReCaptcha3Field(action="contact")


# ----------------------------
# Home routes
# ----------------------------
@home.route("/")
def index():
    return render_template("home.html")


@home.route("/contact", methods=["GET"])
def contact_form():
    return render_template("contact.html", form=ContactForm())


@home.route("/contact", methods=["POST"])
@limiter.limit(lambda: current_app.config.get("CONTACT_RATE_LIMIT", Config.CONTACT_RATE_LIMIT))
def contact():
    form = ContactForm()
    if not form.validate_on_submit():
        flash("All fields are required", "error")
        return render_template("contact.html", form=form), 400

    # The token is only carried here; checking it against the siteverify
    # API is left to the application receiving the form.
    token = form.recaptcha_token.data
    current_app.logger.info(
        f"Contact form submitted from {request.remote_addr} "
        f"({'with' if token else 'without'} reCAPTCHA token)"
    )

    flash("Thank you for your message! We will get back to you soon.", "success")
    return redirect(url_for("home.contact_form"))
