"""
Tracker blueprint routes.

Public routes:
  GET  /        – start page (name form)
  POST /home    – log in by name, creating the user and family if new

Session routes (redirect to / without an active user):
  GET  /home    – map of the current user's visited countries
  POST /add     – record a visited country by free-text name
  POST /user    – switch the active member, or show the new-member form
  POST /new     – add a member to the current family and switch to them
  GET  /logout  – forget the active user
"""
from flask import current_app, flash, redirect, render_template, session, url_for
from sqlalchemy.exc import SQLAlchemyError

from blueprints.tracker import tracker_bp
from blueprints.tracker.forms import AddCountryForm, LoginForm, NewMemberForm, SwitchUserForm
from extensions import db, limiter
from services.family_service import FamilyService
from services.ledger_service import CountryNotFound, LedgerService
from utils.session_context import SessionContext, session_required


# ── Helpers ───────────────────────────────────────────────────────────────────

def _login_rate_limit():
    return current_app.config.get('LOGIN_RATE_LIMIT', '20 per minute')


def _flash_form_errors(form):
    for errors in form.errors.values():
        for error in errors:
            flash(error, 'danger')


def _database_error(message, fallback):
    """Roll back, log the active exception and redirect to *fallback*."""
    db.session.rollback()
    current_app.logger.exception(message)
    flash('Something went wrong talking to the database. Please try again.', 'danger')
    return redirect(url_for(fallback))


def _render_home(ctx):
    """Render the map for *ctx*, re-reading ledger, user and family every time."""
    try:
        user = FamilyService.get_user_by_id(ctx.user_id)
        if user is None:
            current_app.logger.warning(f'Session refers to missing user {ctx.user_id}; clearing session')
            ctx.clear()
            ctx.save(session)
            return redirect(url_for('tracker.start'))

        countries = LedgerService.list_visited_codes(user.id)
        members = FamilyService.get_family_members(ctx.family_id)
    except SQLAlchemyError:
        return _database_error('Error loading home view', 'tracker.start')

    current_app.logger.debug(
        f'Rendering home for user {user.id}: {len(countries)} countries, {len(members)} members'
    )
    return render_template(
        'tracker/index.html',
        countries=countries,
        total=len(countries),
        users=members,
        color=user.color,
        current_user=user,
        form=AddCountryForm(formdata=None),
        switch_form=SwitchUserForm(formdata=None),
    )


# ── Public routes ─────────────────────────────────────────────────────────────

@tracker_bp.route('/', methods=['GET'])
def start():
    """Start page asking who is using the tracker"""
    return render_template('tracker/start.html', form=LoginForm(formdata=None))


@tracker_bp.route('/home', methods=['POST'])
@limiter.limit(_login_rate_limit)
def login():
    """Log in by display name; an unseen name starts a new family"""
    form = LoginForm()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return redirect(url_for('tracker.start'))

    name = form.username.data
    current_app.logger.info(f'Login requested for "{name}"')
    try:
        user = FamilyService.resolve_or_create_user(name)
    except SQLAlchemyError:
        return _database_error(f'Error resolving user "{name}"', 'tracker.start')

    ctx = SessionContext.from_session(session)
    ctx.identify(user)
    ctx.save(session)
    return _render_home(ctx)


# ── Session routes ────────────────────────────────────────────────────────────

@tracker_bp.route('/home', methods=['GET'])
@session_required
def home(ctx):
    return _render_home(ctx)


@tracker_bp.route('/add', methods=['POST'])
@session_required
def add_country(ctx):
    """Record a visited country; always lands back on home"""
    form = AddCountryForm()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return redirect(url_for('tracker.home'))

    current_app.logger.info(f'Adding visited country "{form.country.data}" for user {ctx.user_id}')
    try:
        LedgerService.record_visit(ctx.user_id, form.country.data)
    except CountryNotFound as e:
        current_app.logger.warning(f'Country not found: "{e.query}"')
        flash(f'{e}. Try another spelling.', 'warning')
    except SQLAlchemyError:
        return _database_error('Error inserting visited country', 'tracker.home')

    return redirect(url_for('tracker.home'))


@tracker_bp.route('/user', methods=['POST'])
@session_required
def user(ctx):
    """Family tab bar: switch member, or open the new-member form"""
    form = SwitchUserForm()
    if form.wants_new_member:
        return render_template(
            'tracker/new.html',
            form=NewMemberForm(formdata=None, color=current_app.config['DEFAULT_USER_COLOR']),
        )

    if not form.validate_on_submit():
        _flash_form_errors(form)
        return redirect(url_for('tracker.home'))

    target_id = form.user.data
    family_id = None
    if current_app.config.get('REDERIVE_FAMILY_ON_SWITCH'):
        try:
            target = FamilyService.get_user_by_id(target_id)
        except SQLAlchemyError:
            return _database_error(f'Error looking up user {target_id}', 'tracker.home')
        if target is None:
            flash('That family member no longer exists.', 'warning')
            return redirect(url_for('tracker.home'))
        family_id = target.family_id

    current_app.logger.info(f'Switching active user {ctx.user_id} -> {target_id}')
    ctx.switch_user(target_id, family_id)
    ctx.save(session)
    return redirect(url_for('tracker.home'))


@tracker_bp.route('/new', methods=['POST'])
@limiter.limit(_login_rate_limit)
@session_required
def new_member(ctx):
    """Create a member under the current family and make them active"""
    form = NewMemberForm()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return render_template('tracker/new.html', form=form)

    current_app.logger.info(
        f'Adding new user: {form.name.data}, color: {form.color.data}, family_id: {ctx.family_id}'
    )
    try:
        member = FamilyService.add_family_member(form.name.data, form.color.data, ctx.family_id)
    except SQLAlchemyError:
        return _database_error('Error inserting new user', 'tracker.home')

    ctx.switch_user(member.id)
    ctx.save(session)
    return redirect(url_for('tracker.home'))


@tracker_bp.route('/logout', methods=['GET'])
def logout():
    """Forget the active user"""
    ctx = SessionContext.from_session(session)
    ctx.clear()
    ctx.save(session)
    flash('You have been logged out.', 'info')
    return redirect(url_for('tracker.start'))
