import flask
import flask_halrest

# Create the Flask application.
app = flask.Flask(__name__)
app.config['DEBUG'] = True

# Some people and their children, keyed by identifier.
PEOPLE = {
    'anakin': dict(id='anakin', name='Anakin Skywalker'),
    'padme': dict(id='padme', name='Padme Amidala'),
}
CHILDREN = {
    'anakin': [dict(id='luke', name='Luke Skywalker'),
               dict(id='leia', name='Leia Organa')],
}


# Callbacks receive the route match of the request, from which they can
# read the identifiers of parent resources.
def fetch_person(identifier, route_match):
    return PEOPLE.get(identifier)


def fetch_people(route_match):
    return list(PEOPLE.values())


def fetch_child(identifier, route_match):
    for child in CHILDREN.get(route_match.get('id'), []):
        if child['id'] == identifier:
            return child
    return None


def fetch_children(route_match):
    return CHILDREN.get(route_match.get('id'), [])


# Declare the routes. The child route is nested under the parent, so its
# URLs are /api/people/<id>/children[/<child_id>].
routes = {
    'people': {
        'route': '/api/people[/:id]',
        'child_routes': {
            'children': {'route': '/children[/:child_id]'},
        },
    },
}

# Create the Flask-HALRest manager and expose the resources.
manager = flask_halrest.HALManager(app, routes=routes)
manager.create_resource('people', fetch=fetch_person, fetch_all=fetch_people)
manager.create_resource('people/children', fetch=fetch_child,
                        fetch_all=fetch_children,
                        route_identifier_name='child_id')

# start the flask loop
app.run()
