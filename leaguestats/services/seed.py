import json
import logging
import time

from leaguestats.extensions import db
from leaguestats.models import League, Season, Match, MatchDetails, PlayerMatchStats

logger = logging.getLogger(__name__)

DEMO_MATCH_ID = 'demo_match_1'

DEMO_PLAYERS = [
    {'name': 'Bukayo Saka', 'team_name': 'Arsenal', 'position': 'F',
     'rating': 8.5, 'minutes_played': 90, 'goals': 1, 'goal_assist': 1},
    {'name': 'Martin Ødegaard', 'team_name': 'Arsenal', 'position': 'M',
     'rating': 8.2, 'minutes_played': 90, 'goals': 1, 'goal_assist': 0},
    {'name': 'Raheem Sterling', 'team_name': 'Chelsea', 'position': 'F',
     'rating': 7.1, 'minutes_played': 90, 'goals': 1, 'goal_assist': 0},
]


def seed_demo_data():
    """Create a demo league with one finished match. Safe to re-run."""
    league = League.query.filter_by(name='Premier League').first()
    if not league:
        league = League(name='Premier League', country='England',
                        logo_url='https://logos.pl/images/premier-league-logo.png')
        db.session.add(league)
        db.session.flush()

    season = Season.query.filter_by(season='2023-24', league_id=league.id).first()
    if not season:
        season = Season(season='2023-24', league_id=league.id, is_active=True)
        db.session.add(season)
        db.session.flush()

    match = Match.query.filter_by(match_id=DEMO_MATCH_ID).first()
    if not match:
        match = Match(match_id=DEMO_MATCH_ID, season_id=season.id, status='finished')
        db.session.add(match)
        db.session.flush()

    if not MatchDetails.query.filter_by(match_id=DEMO_MATCH_ID).first():
        db.session.add(MatchDetails(match_id=DEMO_MATCH_ID, raw_json=json.dumps({
            'homeTeam': {'name': 'Arsenal', 'id': 1},
            'awayTeam': {'name': 'Chelsea', 'id': 2},
            'homeScore': {'normaltime': 2},
            'awayScore': {'normaltime': 1},
            'startTimestamp': int(time.time()),
            'status': {'type': 'finished'},
        })))

    added = 0
    for player in DEMO_PLAYERS:
        exists = PlayerMatchStats.query.filter_by(match_id=DEMO_MATCH_ID, name=player['name']).first()
        if exists:
            continue
        db.session.add(PlayerMatchStats(match_id=DEMO_MATCH_ID, **player))
        added += 1

    db.session.commit()
    logger.info("Demo data seeded (%d new player lines)", added)
    return season
