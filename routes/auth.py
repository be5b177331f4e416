from flask import Blueprint, render_template, redirect, url_for, request, flash, session, current_app
from flask_login import login_user, logout_user, login_required, current_user
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build
from models.admin_user import AdminUser, is_allowed_email
import logging

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)

SCOPES = [
    'openid',
    'https://www.googleapis.com/auth/userinfo.email',
    'https://www.googleapis.com/auth/userinfo.profile',
]


def build_flow(state=None, code_verifier=None):
    flow = Flow.from_client_config(
        {
            "web": {
                "client_id": current_app.config['GOOGLE_CLIENT_ID'],
                "client_secret": current_app.config['GOOGLE_CLIENT_SECRET'],
                "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                "token_uri": "https://oauth2.googleapis.com/token",
            }
        },
        scopes=SCOPES,
        state=state,
    )
    flow.redirect_uri = url_for('auth.callback', _external=True)
    if code_verifier:
        flow.code_verifier = code_verifier
    return flow


def fetch_google_profile(authorization_response, state, code_verifier=None):
    flow = build_flow(state=state, code_verifier=code_verifier)
    flow.fetch_token(authorization_response=authorization_response)
    oauth2_service = build('oauth2', 'v2', credentials=flow.credentials, cache_discovery=False)
    return oauth2_service.userinfo().get().execute()


@auth_bp.route('/login')
def login():
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.dashboard'))
    return render_template('login.html')


@auth_bp.route('/login/google')
def login_google():
    flow = build_flow()
    auth_url, state = flow.authorization_url(prompt='select_account', include_granted_scopes='true')
    session['oauth_state'] = state
    session['oauth_code_verifier'] = flow.code_verifier
    return redirect(auth_url)


@auth_bp.route('/auth/callback')
def callback():
    state = session.pop('oauth_state', None)
    code_verifier = session.pop('oauth_code_verifier', None)
    if not state or request.args.get('state') != state:
        flash('Sign-in expired, please try again.')
        return redirect(url_for('auth.login'))
    if request.args.get('error'):
        flash('Sign-in was cancelled.')
        return redirect(url_for('auth.login'))
    try:
        profile = fetch_google_profile(request.url, state, code_verifier)
    except Exception:
        logger.exception('Google sign-in failed')
        flash('Sign-in failed, please try again.')
        return redirect(url_for('auth.login'))

    email = profile.get('email')
    if not is_allowed_email(email, current_app.config['ADMIN_EMAILS']):
        logger.warning('Rejected sign-in for %s', email)
        flash('This account is not allowed to access the admin panel.')
        return redirect(url_for('auth.login'))

    user = AdminUser(email, name=profile.get('name'), picture=profile.get('picture'))
    session['admin_name'] = user.name
    session['admin_picture'] = user.picture
    login_user(user)
    logger.info('Admin %s signed in', user.email)
    return redirect(url_for('dashboard.dashboard'))


@auth_bp.route('/logout')
@login_required
def logout():
    logger.info('Admin %s signed out', current_user.email)
    logout_user()
    session.pop('admin_name', None)
    session.pop('admin_picture', None)
    return redirect(url_for('auth.login'))
