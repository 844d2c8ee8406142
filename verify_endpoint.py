import os
import sys

import requests

BASE_URL = os.environ.get('API_URL', 'http://127.0.0.1:8000')

try:
    r = requests.get(f'{BASE_URL}/health', timeout=10)
    if r.status_code != 200:
        print(f"Health check failed: {r.status_code}")
        sys.exit(1)

    r = requests.get(f'{BASE_URL}/api/leagues', timeout=10)
    body = r.json()
    if r.status_code != 200 or not body.get('success'):
        print(f"Leagues failed: {r.status_code}")
        sys.exit(1)

    leagues = body['data']
    print(f"Received {len(leagues)} leagues.")
    if not leagues:
        print("No leagues in the database. Run 'flask --app leaguestats seed-demo' first.")
        sys.exit(1)

    r = requests.get(f"{BASE_URL}/api/leagues/{leagues[0]['id']}/seasons", timeout=10)
    seasons = r.json()['data']
    if not seasons:
        print(f"League {leagues[0]['name']} has no seasons.")
        sys.exit(1)

    season_id = seasons[0]['id']
    for path in ('standings', 'stats', 'players', 'dream-team', 'points-progress'):
        r = requests.get(f'{BASE_URL}/api/leagues/seasons/{season_id}/{path}', timeout=30)
        if r.status_code != 200:
            print(f"FAILURE: {path} returned {r.status_code}")
            sys.exit(1)
        data = r.json()['data']
        print(f"{path}: {len(data) if isinstance(data, list) else 1} rows")

    print("SUCCESS: season endpoints responded.")
except Exception as e:
    print(f"Error: {e}")
    sys.exit(1)
