import logging
import os

from flask import Blueprint, Flask, current_app, jsonify, request, send_from_directory, session, url_for
from flask_migrate import Migrate

from config import get_config
from models import db
from services import (
    SearchState, add_ingredient, remove_ingredient, shuffle, clear,
    visible_sets, search_recipes_by_ingredients, parse_recipe_form,
    fetch_recipes_with_ingredients_and_instructions, get_recipe, get_user_recipes,
    create_recipe, update_recipe, delete_recipe, image_in_use,
    get_saved_recipes, is_saved, saved_recipe_ids, save_recipe, unsave_recipe,
    suggest_ingredients,
    InputUnavailable, RecipeNotFound, RecipeAlreadySaved, RecipeValidationError,
    RecipeServiceError, safe_int,
)
from utils import save_recipe_image, allowed_file, ImageValidationError

logger = logging.getLogger(__name__)

migrate = Migrate()
bp = Blueprint('recipes', __name__)

# Session key holding the serialized SearchState
SEARCH_SESSION_KEY = 'search'

# Public URL prefix of uploaded recipe images
UPLOAD_URL_PREFIX = '/uploads/'


def _current_user_id():
    # TODO: read the user from authentication once login exists
    return current_app.config['DEFAULT_USER_ID']


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _load_search_state():
    return SearchState.from_dict(session.get(SEARCH_SESSION_KEY))


def _store_search_state(state):
    session[SEARCH_SESSION_KEY] = state.to_dict()


def _search_payload(state):
    """Run the search for a state and return the visible sets as JSON data."""
    result = search_recipes_by_ingredients(state.ingredients)
    exact, related = visible_sets(state.rotation, result.exact, result.related,
                                  current_app.config['RECIPES_PER_SET'])
    saved_ids = saved_recipe_ids(_current_user_id()) if state.ingredients else set()
    return {
        'ingredients': list(state.ingredients),
        'rotation': state.rotation,
        'exact': [s.to_dict() for s in exact],
        'related': [s.to_dict() for s in related],
        'total_exact': len(result.exact),
        'total_related': len(result.related),
        'saved_recipe_ids': sorted(saved_ids),
    }


def _store_upload(file):
    """Validate and save an uploaded image, returning its public URL."""
    if not allowed_file(file.filename):
        raise ImageValidationError('Invalid file type. Use PNG, JPG, GIF, or WEBP.')
    filename = save_recipe_image(file, current_app.config['UPLOAD_FOLDER'])
    return url_for('recipes.uploaded_image', filename=filename)


def _remove_upload(image_url):
    """Delete a stored image if the URL points at our upload folder.

    Callers check that no recipe still uses the image.
    """
    prefix = request.script_root + UPLOAD_URL_PREFIX
    if not image_url or not image_url.startswith(prefix):
        return
    path = os.path.join(current_app.config['UPLOAD_FOLDER'], os.path.basename(image_url))
    try:
        if os.path.exists(path):
            os.remove(path)
    except OSError:
        logger.warning("Could not remove image %s", path)


# ============================================
# ROUTES - RECIPES
# ============================================

@bp.route('/api/recipes')
def recipes_list():
    recipes = fetch_recipes_with_ingredients_and_instructions()
    return jsonify([r.to_dict() for r in recipes])


@bp.route('/api/recipes', methods=['POST'])
def recipe_add():
    if request.is_json:
        data = _json_body()
        fields = dict(data)
        ingredients = data.get('ingredients')
        instructions = data.get('instructions')
    else:
        fields, ingredients, instructions = parse_recipe_form(request.form)

    # Only an image stored by this request is ours to clean up
    uploaded_url = None
    image = request.files.get('image')
    if image and image.filename:
        uploaded_url = fields['image_url'] = _store_upload(image)

    try:
        recipe = create_recipe(fields, ingredients, instructions, user_id=_current_user_id())
    except RecipeServiceError:
        _remove_upload(uploaded_url)
        raise
    return jsonify(recipe.to_dict()), 201


@bp.route('/api/recipes/<int:id>')
def recipe_view(id):
    recipe = get_recipe(id)
    data = recipe.to_dict()
    data['is_saved'] = is_saved(_current_user_id(), id)
    return jsonify(data)


@bp.route('/api/recipes/<int:id>', methods=['PATCH'])
def recipe_edit(id):
    old_image_url = get_recipe(id).image_url
    recipe = update_recipe(id, _json_body())
    if old_image_url != recipe.image_url and not image_in_use(old_image_url):
        _remove_upload(old_image_url)
    return jsonify(recipe.to_dict())


@bp.route('/api/recipes/<int:id>', methods=['DELETE'])
def recipe_delete(id):
    image_url = get_recipe(id).image_url
    delete_recipe(id)
    if not image_in_use(image_url):
        _remove_upload(image_url)
    return '', 204


@bp.route('/api/images', methods=['POST'])
def image_upload():
    image = request.files.get('image')
    if not image or not image.filename:
        raise ImageValidationError('No image selected')
    return jsonify({'image_url': _store_upload(image)}), 201


@bp.route(UPLOAD_URL_PREFIX + '<path:filename>')
def uploaded_image(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


# ============================================
# ROUTES - SAVED RECIPES
# ============================================

@bp.route('/api/recipes/<int:id>/save', methods=['POST'])
def recipe_save(id):
    save_recipe(_current_user_id(), id)
    return jsonify({'recipe_id': id, 'saved': True}), 201


@bp.route('/api/recipes/<int:id>/save', methods=['DELETE'])
def recipe_unsave(id):
    unsave_recipe(_current_user_id(), id)
    return jsonify({'recipe_id': id, 'saved': False})


@bp.route('/api/recipes/<int:id>/saved')
def recipe_saved_status(id):
    return jsonify({'recipe_id': id, 'saved': is_saved(_current_user_id(), id)})


@bp.route('/api/profile')
def profile():
    user_id = _current_user_id()
    return jsonify({
        'user_id': user_id,
        'created': [r.to_dict() for r in get_user_recipes(user_id)],
        'saved': [r.to_dict() for r in get_saved_recipes(user_id)],
    })


# ============================================
# ROUTES - INGREDIENT SEARCH
# ============================================

@bp.route('/api/ingredients/suggest')
def ingredient_suggest():
    return jsonify(suggest_ingredients(request.args.get('q', '')))


@bp.route('/api/search')
def search_view():
    return jsonify(_search_payload(_load_search_state()))


@bp.route('/api/search', methods=['DELETE'])
def search_clear():
    state = clear(_load_search_state())
    _store_search_state(state)
    return jsonify(_search_payload(state))


@bp.route('/api/search/ingredients', methods=['POST'])
def search_add_ingredient():
    raw = _json_body().get('ingredient', request.form.get('ingredient', ''))
    state = add_ingredient(_load_search_state(), raw)
    _store_search_state(state)
    return jsonify(_search_payload(state))


@bp.route('/api/search/ingredients/<path:name>', methods=['DELETE'])
def search_remove_ingredient(name):
    state = remove_ingredient(_load_search_state(), name)
    _store_search_state(state)
    return jsonify(_search_payload(state))


@bp.route('/api/search/shuffle', methods=['POST'])
def search_shuffle():
    state = shuffle(_load_search_state())
    _store_search_state(state)
    return jsonify(_search_payload(state))


@bp.route('/api/search/query', methods=['POST'])
def search_query():
    """Stateless search: the client sends the ingredients and rotation."""
    data = _json_body()
    ingredients = data.get('ingredients')
    if not isinstance(ingredients, list):
        ingredients = []
    state = SearchState.from_dict({
        'ingredients': ingredients,
        'rotation': safe_int(data.get('rotation'), default=0, min_val=0),
    })
    return jsonify(_search_payload(state))


# ============================================
# ERROR HANDLERS
# ============================================

def _error(status):
    def handler(error):
        return jsonify({'error': str(error)}), status
    return handler


def register_error_handlers(app):
    app.register_error_handler(RecipeNotFound, _error(404))
    app.register_error_handler(RecipeAlreadySaved, _error(409))
    app.register_error_handler(RecipeValidationError, _error(400))
    app.register_error_handler(ImageValidationError, _error(400))
    app.register_error_handler(InputUnavailable, _error(503))


# ============================================
# APPLICATION FACTORY
# ============================================

def create_app(config_name=None, config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=getattr(logging, app.config['LOG_LEVEL'], logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Create upload folder if it doesn't exist
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(bp)
    register_error_handlers(app)
    return app


def init_db(app):
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
