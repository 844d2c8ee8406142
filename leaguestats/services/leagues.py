from sqlalchemy import func

from leaguestats.extensions import db
from leaguestats.models import League, Season, Match


def get_all_leagues():
    leagues = League.query.order_by(League.name.asc()).all()
    return [
        {'id': l.id, 'name': l.name, 'country': l.country, 'logo_url': l.logo_url}
        for l in leagues
    ]


def get_seasons_by_league(league_id):
    rows = db.session.query(
        Season.id,
        Season.season,
        League.name.label('league_name'),
        func.count(Match.id).label('match_count'),
    ).join(League, Season.league_id == League.id)\
        .outerjoin(Match, Match.season_id == Season.id)\
        .filter(League.id == league_id)\
        .group_by(Season.id, Season.season, League.name)\
        .order_by(Season.season.desc())\
        .all()
    return [row._asdict() for row in rows]
