from jinja2 import DictLoader, Environment, select_autoescape

from stuff_manager.applications.client.stuff_state import StuffState, can_go_next, can_go_previous

LOADING_LABEL = "Loading"
ERROR_LABEL = "Error!"
EMPTY_MESSAGE = "No stuff items found."
COLUMN_HEADERS = ("ID", "Name", "Description")

STUFF_LIST_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Stuff Manager</title>
</head>
<body>
<main class="stuff-manager">
  <header>
    <h1>Stuff Manager</h1>
    <p>Manage your stuff items</p>
  </header>
  <section class="stuff-list">
    <h2>Stuff List</h2>
{%- if state.loading %}
    <div role="status" aria-label="{{ loading_label }}" class="spinner">{{ loading_label }}...</div>
{%- elif state.error is not none %}
    <div role="alert" class="alert alert-error">
      <strong>{{ error_label }}</strong>
      <span>{{ state.error }}</span>
    </div>
{%- elif not state.items %}
    <p class="empty-state">{{ empty_message }}</p>
{%- else %}
    <table>
      <thead>
        <tr>{% for header in headers %}<th scope="col">{{ header }}</th>{% endfor %}</tr>
      </thead>
      <tbody>
{%- for item in state.items %}
        <tr><td>{{ item.id }}</td><td>{{ item.name }}</td><td>{{ item.description }}</td></tr>
{%- endfor %}
      </tbody>
    </table>
{%- endif %}
    <nav aria-label="Pagination">
      <form method="get" action="{{ action }}">
        <button type="submit" name="page" value="{{ state.current_page - 1 }}" aria-label="Previous page"
          {%- if not has_previous %} disabled{% endif %}>Previous</button>
        <span class="page-indicator">Page {{ state.current_page }}</span>
        <button type="submit" name="page" value="{{ state.current_page + 1 }}" aria-label="Next page"
          {%- if not has_next %} disabled{% endif %}>Next</button>
      </form>
    </nav>
  </section>
</main>
</body>
</html>
"""

_environment = Environment(
    loader=DictLoader({"stuff_list.html": STUFF_LIST_TEMPLATE}),
    autoescape=select_autoescape(default=True, default_for_string=True),
)


def render_stuff_list(state: StuffState, action: str = "/") -> str:
    """Render the list page for ``state``.

    Only one of loading indicator, error alert, empty message or table is
    shown, checked in that order. The pagination controls are always present.
    """
    template = _environment.get_template("stuff_list.html")
    return template.render(
        state=state,
        action=action,
        headers=COLUMN_HEADERS,
        loading_label=LOADING_LABEL,
        error_label=ERROR_LABEL,
        empty_message=EMPTY_MESSAGE,
        has_previous=can_go_previous(state),
        has_next=can_go_next(state),
    )
