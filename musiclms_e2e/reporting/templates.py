"""Jinja2 template for the HTML suite report."""

REPORT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
  body { font-family: -apple-system, "Segoe UI", Roboto, sans-serif; background: #1e1e2e; color: #e0e0e0; margin: 0; padding: 24px; }
  h1 { margin: 0 0 4px; }
  .subtitle { color: #9a9ab0; margin-bottom: 24px; }
  table { border-collapse: collapse; margin-bottom: 24px; }
  th, td { text-align: left; padding: 4px 12px; border-bottom: 1px solid #33334a; vertical-align: top; }
  .summary span { display: inline-block; margin-right: 16px; padding: 6px 12px; border-radius: 4px; background: #2a2a3d; }
  .test { border: 1px solid #33334a; border-radius: 6px; margin-bottom: 16px; padding: 12px 16px; background: #26263a; }
  .status { font-weight: bold; padding: 2px 8px; border-radius: 3px; }
  .PASS { background: #1f6f43; } .FAIL { background: #8b1e2d; } .SKIP { background: #7a6a1a; }
  .INFO { color: #9ab6ff; } .WARNING { color: #ffc66d; }
  pre { white-space: pre-wrap; background: #1a1a28; padding: 8px; border-radius: 4px; }
  img { max-width: 100%; border: 1px solid #33334a; margin-top: 8px; }
</style>
</head>
<body>
<h1>{{ title }}</h1>
<div class="subtitle">{{ report_name }} &middot; started {{ started_at }}{% if finished_at %} &middot; finished {{ finished_at }}{% endif %}</div>

<div class="summary">
  <span>Total: {{ entries | length }}</span>
  <span class="PASS">Passed: {{ counts.PASS }}</span>
  <span class="FAIL">Failed: {{ counts.FAIL }}</span>
  <span class="SKIP">Skipped: {{ counts.SKIP }}</span>
</div>

<h2>Environment</h2>
<table>
{% for key, value in system_info %}
  <tr><th>{{ key }}</th><td>{{ value }}</td></tr>
{% endfor %}
</table>

<h2>Tests</h2>
{% for entry in entries %}
<div class="test" id="test-{{ loop.index }}">
  <div>
    <span class="status {{ entry.status.value }}">{{ entry.status.value }}</span>
    <strong>{{ entry.name }}</strong>
    {% if entry.description %}<div class="subtitle">{{ entry.description }}</div>{% endif %}
  </div>
  <table>
  {% for line in entry.logs %}
    <tr><td class="{{ line.status.value }}">{{ line.status.value }}</td><td>{{ line.timestamp }}</td><td>{{ line.message }}</td></tr>
  {% endfor %}
  </table>
  {% if entry.cause %}<pre>{{ entry.cause }}</pre>{% endif %}
  {% if entry.screenshot %}<a href="{{ entry.screenshot }}"><img src="{{ entry.screenshot }}" alt="Screenshot of {{ entry.name }}"></a>{% endif %}
</div>
{% endfor %}
</body>
</html>
"""
