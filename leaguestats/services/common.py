from sqlalchemy import select, union_all

from leaguestats.models import Match, MatchDetails


def season_results(season_id):
    """Scored matches of a season, one row per match."""
    return (
        select(
            Match.id.label('match_pk'),
            Match.match_id.label('match_id'),
            MatchDetails.home_team.label('home_team'),
            MatchDetails.away_team.label('away_team'),
            MatchDetails.home_score.label('home_score'),
            MatchDetails.away_score.label('away_score'),
            MatchDetails.start_timestamp.label('match_timestamp'),
        )
        .join(MatchDetails, MatchDetails.match_id == Match.match_id)
        .where(Match.season_id == season_id)
        .where(MatchDetails.home_score.isnot(None), MatchDetails.away_score.isnot(None))
        .subquery('match_results')
    )


def team_rows(results):
    """Unions the home and away side of every match into (team, gf, ga, match_timestamp)."""
    home = select(
        results.c.home_team.label('team'),
        results.c.home_score.label('gf'),
        results.c.away_score.label('ga'),
        results.c.match_timestamp.label('match_timestamp'),
    )
    away = select(
        results.c.away_team.label('team'),
        results.c.away_score.label('gf'),
        results.c.home_score.label('ga'),
        results.c.match_timestamp.label('match_timestamp'),
    )
    return union_all(home, away).subquery('team_matches')
