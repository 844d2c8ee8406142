import json

from sqlalchemy import case, func, null, or_

from leaguestats.extensions import db
from leaguestats.models import Match, MatchDetails
from leaguestats.services.common import season_results


def get_team_details(season_id, team_name):
    """Season record for one team, or None when it has no scored match."""
    results = season_results(season_id)
    is_home = results.c.home_team == team_name
    goals_for = case((is_home, results.c.home_score), else_=results.c.away_score)
    goals_against = case((is_home, results.c.away_score), else_=results.c.home_score)

    row = db.session.query(
        func.count().label('total_matches'),
        func.sum(case((goals_for > goals_against, 1), else_=0)).label('wins'),
        func.sum(case((goals_for == goals_against, 1), else_=0)).label('draws'),
        func.sum(case((goals_for < goals_against, 1), else_=0)).label('losses'),
        func.sum(goals_for).label('goals_for'),
        func.sum(goals_against).label('goals_against'),
    ).select_from(results)\
        .filter(or_(results.c.home_team == team_name, results.c.away_team == team_name))\
        .one()

    if not row.total_matches:
        return None

    return {
        'team_name': team_name,
        'total_matches': row.total_matches,
        'wins': row.wins,
        'draws': row.draws,
        'losses': row.losses,
        'goals_for': row.goals_for,
        'goals_against': row.goals_against,
        'goal_difference': row.goals_for - row.goals_against,
        'points': row.wins * 3 + row.draws,
        'win_percentage': round(row.wins * 100.0 / row.total_matches, 2),
    }


def get_team_matches(season_id, team_name):
    """All fixtures of a team in a season, most recent first."""
    home, away = MatchDetails.home_score, MatchDetails.away_score
    is_home = MatchDetails.home_team == team_name

    result = case(
        (or_(home.is_(None), away.is_(None)), null()),
        (home == away, 'D'),
        (is_home & (home > away), 'W'),
        (~is_home & (away > home), 'W'),
        else_='L',
    )

    rows = db.session.query(
        Match.id.label('match_id'),
        Match.match_id.label('match_code'),
        MatchDetails.home_team.label('home_team'),
        MatchDetails.away_team.label('away_team'),
        home.label('home_score'),
        away.label('away_score'),
        MatchDetails.start_timestamp.label('match_timestamp'),
        MatchDetails.venue.label('venue'),
        MatchDetails.status.label('match_status'),
        case((is_home, 'home'), else_='away').label('team_venue'),
        result.label('result'),
    ).join(MatchDetails, MatchDetails.match_id == Match.match_id)\
        .filter(Match.season_id == season_id)\
        .filter(or_(is_home, MatchDetails.away_team == team_name))\
        .order_by(MatchDetails.start_timestamp.desc())\
        .all()
    return [row._asdict() for row in rows]


def get_match_details(season_id, home_team, away_team):
    rows = db.session.query(
        Match.match_id.label('match_id'),
        MatchDetails.home_team.label('home_team'),
        MatchDetails.away_team.label('away_team'),
        MatchDetails.home_score.label('home_score'),
        MatchDetails.away_score.label('away_score'),
        MatchDetails.start_timestamp.label('match_timestamp'),
        MatchDetails.raw_json.label('raw_json'),
    ).join(MatchDetails, MatchDetails.match_id == Match.match_id)\
        .filter(Match.season_id == season_id)\
        .filter(MatchDetails.home_team == home_team, MatchDetails.away_team == away_team)\
        .order_by(MatchDetails.start_timestamp.desc())\
        .all()

    matches = []
    for row in rows:
        match = row._asdict()
        match['match_data'] = json.loads(match.pop('raw_json'))
        matches.append(match)
    return matches


def get_match_teams(match_id):
    rows = db.session.query(
        MatchDetails.home_team.label('home_team'),
        MatchDetails.away_team.label('away_team'),
        MatchDetails.home_score.label('home_score'),
        MatchDetails.away_score.label('away_score'),
        MatchDetails.start_timestamp.label('match_timestamp'),
    ).filter(MatchDetails.match_id == match_id).all()
    return [row._asdict() for row in rows]
