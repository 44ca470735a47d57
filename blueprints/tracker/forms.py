"""
Tracker Forms
One validated input struct per action; routes never read request.form directly.
"""
from flask import current_app
from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, RadioField, SubmitField
from wtforms.validators import DataRequired, InputRequired, Length


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class LoginForm(FlaskForm):
    """Start page: who is using the tracker"""
    username = StringField('Your name', filters=[_strip], validators=[
        DataRequired(message='Please enter your name'),
        Length(max=100, message='Name must be at most 100 characters')
    ])
    submit = SubmitField('Start')


class AddCountryForm(FlaskForm):
    """Record a visited country by (partial) name"""
    country = StringField('Country', filters=[_strip], validators=[
        DataRequired(message='Enter a country name'),
        Length(max=100, message='Country name must be at most 100 characters')
    ])
    submit = SubmitField('Add')


class SwitchUserForm(FlaskForm):
    """Family tab bar: either a member id or ``add=new``"""
    user = IntegerField('Member', validators=[
        InputRequired(message='Choose a family member')
    ])
    add = StringField('Add member')

    @property
    def wants_new_member(self):
        return self.add.data == 'new'


class NewMemberForm(FlaskForm):
    """Add a member to the current family"""
    name = StringField('Name', filters=[_strip], validators=[
        DataRequired(message='Name is required'),
        Length(max=100, message='Name must be at most 100 characters')
    ])
    color = RadioField('Color', validators=[
        InputRequired(message='Pick a color')
    ])
    submit = SubmitField('Add')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Palette comes from config; anything else fails validation
        self.color.choices = [(c, c) for c in current_app.config['MEMBER_COLORS']]
