"""
Shared pytest fixtures.

Every test gets a fresh application bound to an in-memory SQLite database,
plus small factories for building seasons out of feed-shaped rows.
"""
import json

import pytest

from config import TestConfig
from leaguestats import create_app
from leaguestats.extensions import db
from leaguestats.models import League, Season, Match, MatchDetails, PlayerMatchStats


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def season(app):
    league = League(name='Test League', country='Testland')
    db.session.add(league)
    db.session.flush()
    season = Season(season='2024-25', league_id=league.id, is_active=True)
    db.session.add(season)
    db.session.commit()
    return season


@pytest.fixture
def add_match(season):
    """Factory adding a match and its raw feed payload to the season."""
    counter = {'n': 0}

    def _add(home, away, home_score, away_score, timestamp=None, venue='Test Ground', season_id=None):
        counter['n'] += 1
        match_id = f'm{counter["n"]}'
        payload = {
            'homeTeam': {'name': home, 'manager': {'name': f'{home} Manager'}},
            'awayTeam': {'name': away, 'manager': {'name': f'{away} Manager'}},
            'homeScore': {'normaltime': home_score} if home_score is not None else {},
            'awayScore': {'normaltime': away_score} if away_score is not None else {},
            'startTimestamp': timestamp if timestamp is not None else 1000 * counter['n'],
            'venue': {'name': venue},
            'status': {'type': 'finished' if home_score is not None else 'notstarted'},
        }
        db.session.add(Match(match_id=match_id, season_id=season_id or season.id))
        db.session.add(MatchDetails(match_id=match_id, raw_json=json.dumps(payload)))
        db.session.commit()
        return match_id

    return _add


@pytest.fixture
def add_line():
    """Factory adding one player's box score for a match."""
    def _add(match_id, name, team, position, country='Testland', **stats):
        stats.setdefault('minutes_played', 90)
        line = PlayerMatchStats(
            match_id=match_id,
            name=name,
            team_name=team,
            position=position,
            country=json.dumps({'name': country}) if country else None,
            **stats
        )
        db.session.add(line)
        db.session.commit()
        return line

    return _add
