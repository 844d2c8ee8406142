import traceback

try:
    from leaguestats import create_app
    flask_app = create_app()

    rules = sorted(flask_app.url_map.iter_rules(), key=lambda r: r.rule)
    print("Registered routes:")
    for r in rules:
        methods = ','.join(sorted(m for m in r.methods if m not in ('HEAD', 'OPTIONS')))
        print(f"  {methods:6} {r.rule}")
except Exception:
    traceback.print_exc()
