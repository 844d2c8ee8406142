from collections import defaultdict

from sqlalchemy import case, func, select

from leaguestats.extensions import db
from leaguestats.services.common import season_results, team_rows

FORM_LENGTH = 5
FORM_GLYPHS = {'W': '🟢', 'D': '⚪', 'L': '🔴'}


def _outcome(goals_for, goals_against):
    if goals_for > goals_against:
        return 'W'
    if goals_for == goals_against:
        return 'D'
    return 'L'


def _recent_form(team_matches):
    """Map each team to its last FORM_LENGTH results, most recent first."""
    position = func.row_number().over(
        partition_by=team_matches.c.team,
        order_by=team_matches.c.match_timestamp.desc(),
    ).label('rn')
    ranked = select(team_matches.c.team, team_matches.c.gf, team_matches.c.ga, position).subquery('ranked')

    recent = db.session.query(ranked.c.team, ranked.c.gf, ranked.c.ga)\
        .filter(ranked.c.rn <= FORM_LENGTH)\
        .order_by(ranked.c.team, ranked.c.rn)\
        .all()

    form = defaultdict(str)
    for team, gf, ga in recent:
        form[team] += FORM_GLYPHS[_outcome(gf, ga)]
    return form


def get_league_standings(season_id):
    """Table for a season ordered by points, goal difference, then goals scored."""
    team_matches = team_rows(season_results(season_id))

    won = func.sum(case((team_matches.c.gf > team_matches.c.ga, 1), else_=0))
    drawn = func.sum(case((team_matches.c.gf == team_matches.c.ga, 1), else_=0))
    lost = func.sum(case((team_matches.c.gf < team_matches.c.ga, 1), else_=0))
    goals_for = func.sum(team_matches.c.gf)
    goals_against = func.sum(team_matches.c.ga)
    goal_difference = goals_for - goals_against
    points = won * 3 + drawn

    rows = db.session.query(
        team_matches.c.team,
        func.count().label('played'),
        won.label('won'),
        drawn.label('drawn'),
        lost.label('lost'),
        goals_for.label('goals_for'),
        goals_against.label('goals_against'),
        goal_difference.label('goal_difference'),
        points.label('points'),
    ).group_by(team_matches.c.team)\
        .order_by(points.desc(), goal_difference.desc(), goals_for.desc(), team_matches.c.team.asc())\
        .all()

    form = _recent_form(team_matches)

    return [
        {
            'Team': row.team,
            'Played': row.played,
            'Won': row.won,
            'Drawn': row.drawn,
            'Lost': row.lost,
            'Goals For': row.goals_for,
            'Goals Against': row.goals_against,
            'Goal Difference': row.goal_difference,
            'Points': row.points,
            'Form': form.get(row.team, ''),
        }
        for row in rows
    ]


def get_season_stats(season_id):
    results = season_results(season_id)
    goals = results.c.home_score + results.c.away_score

    row = db.session.query(
        func.count().label('total_matches'),
        func.sum(goals).label('total_goals'),
        func.round(func.avg(goals), 2).label('avg_goals_per_match'),
        func.sum(case((results.c.home_score > results.c.away_score, 1), else_=0)).label('home_wins'),
        func.sum(case((results.c.away_score > results.c.home_score, 1), else_=0)).label('away_wins'),
        func.sum(case((results.c.home_score == results.c.away_score, 1), else_=0)).label('draws'),
    ).select_from(results).one()

    # SUM/AVG over an empty season come back as NULL
    return {
        'total_matches': row.total_matches,
        'total_goals': row.total_goals or 0,
        'avg_goals_per_match': float(row.avg_goals_per_match or 0),
        'home_wins': row.home_wins or 0,
        'away_wins': row.away_wins or 0,
        'draws': row.draws or 0,
    }


def get_team_points_progress(season_id):
    team_matches = team_rows(season_results(season_id))
    match_points = case(
        (team_matches.c.gf > team_matches.c.ga, 3),
        (team_matches.c.gf == team_matches.c.ga, 1),
        else_=0,
    )
    cumulative = func.sum(match_points).over(
        partition_by=team_matches.c.team,
        order_by=team_matches.c.match_timestamp,
        rows=(None, 0),
    )

    rows = db.session.query(
        team_matches.c.team,
        team_matches.c.match_timestamp,
        cumulative.label('points'),
    ).order_by(team_matches.c.match_timestamp, team_matches.c.team).all()
    return [row._asdict() for row in rows]
