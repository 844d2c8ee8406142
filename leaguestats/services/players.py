from sqlalchemy import and_, case, func, literal, or_, select
from thefuzz import process as fuzz_process

from leaguestats.extensions import db
from leaguestats.models import Match, MatchDetails, PlayerMatchStats as P

MIN_MINUTES = 90
DREAM_TEAM_MIN_MINUTES = 300
ALL_PLAYERS_LIMIT = 100

# Positions in display order with the number of picks for each
DREAM_TEAM_FORMATION = {'G': 1, 'D': 4, 'M': 4, 'F': 2}

DREAM_TEAM_WEIGHTS = {
    'G': (('rating', 0.6), ('saves', 0.4)),
    'D': (('rating', 0.5), ('tackles', 0.3), ('interceptions', 0.2)),
    'M': (('rating', 0.4), ('key_passes', 0.3), ('assists', 0.3)),
    'F': (('rating', 0.4), ('goals', 0.4), ('assists', 0.2)),
}


def _total(column):
    return func.sum(func.coalesce(column, 0))


def _avg_rating():
    return func.avg(func.coalesce(P.rating, 0.0))


def _match_pass_accuracy():
    """Per-row pass accuracy in percent, 0 when no passes were attempted."""
    return case(
        (func.coalesce(P.total_pass, 0) > 0,
         db.cast(func.coalesce(P.accurate_pass, 0), db.Float) * 100 / P.total_pass),
        else_=0.0,
    )


def _season_rows(query, season_id):
    return query.join(Match, Match.match_id == P.match_id)\
        .filter(Match.season_id == season_id)\
        .filter(P.name.isnot(None), P.team_name.isnot(None), P.position.isnot(None))


def _player_table(season_id, *criteria):
    """The season player table grouped by player, team, position and country."""
    minutes = _total(P.minutes_played)
    average_rating = func.round(_avg_rating(), 2).label('Average Rating')

    query = db.session.query(
        P.name.label('Player'),
        P.team_name.label('Team'),
        P.position.label('Position'),
        P.country_name.label('Country'),
        average_rating,
        _total(P.goals).label('Goals'),
        _total(P.goal_assist).label('Assists'),
        minutes.label('Minutes Played'),
        (_total(P.shots_on_target) + _total(P.shots_off_target) + _total(P.shots_blocked)).label('Total Shots'),
        _total(P.shots_on_target).label('Shots on Target'),
        func.round(func.avg(_match_pass_accuracy()), 2).label('Pass Accuracy'),
        _total(P.key_pass).label('Key Passes'),
        (_total(P.duel_won) + _total(P.duel_lost)).label('Total Duels'),
        _total(P.duel_won).label('Duels Won'),
        _total(P.total_tackle).label('Tackles'),
        _total(P.outfielder_block).label('Blocks'),
        _total(P.interception_won).label('Interceptions'),
        _total(P.was_fouled).label('Fouls Won'),
        _total(P.fouls).label('Fouls Committed'),
        literal(0).label('Yellow Cards'),
        literal(0).label('Red Cards'),
        _total(P.saves).label('Goalkeeper Saves'),
        literal(0).label('Goals Conceded'),
    )
    query = _season_rows(query, season_id)
    if criteria:
        query = query.filter(*criteria)

    return query.group_by(P.name, P.team_name, P.position, P.country_name)\
        .having(minutes >= MIN_MINUTES)\
        .order_by(average_rating.desc(), P.name.asc())


def get_player_stats(season_id, limit=50):
    rows = _player_table(season_id).limit(limit).all()
    return [row._asdict() for row in rows]


def get_players_by_position(season_id, position, limit=20):
    rows = _player_table(season_id, P.position == position.upper()).limit(limit).all()
    return [row._asdict() for row in rows]


def get_players_by_team(season_id, team_name):
    rows = _player_table(season_id, P.team_name == team_name).all()
    return [row._asdict() for row in rows]


def get_all_players(season_id):
    """Dashboard listing; pass accuracy here is computed from season totals."""
    minutes = _total(P.minutes_played)
    total_passes = _total(P.total_pass)
    accurate_passes = _total(P.accurate_pass)
    performance_score = func.round(_avg_rating(), 2)

    query = db.session.query(
        P.name.label('name'),
        P.team_name.label('team_name'),
        P.position.label('position'),
        P.country_name.label('country'),
        func.max(P.jersey_number).label('jerseyNumber'),
        func.round(_avg_rating(), 2).label('avg_rating'),
        func.count().label('matches_played'),
        minutes.label('total_minutes'),
        _total(P.goals).label('total_goals'),
        _total(P.goal_assist).label('total_assists'),
        _total(P.saves).label('total_saves'),
        total_passes.label('total_passes'),
        accurate_passes.label('accurate_passes'),
        case(
            (total_passes > 0, func.round(db.cast(accurate_passes, db.Float) * 100 / total_passes, 2)),
            else_=0,
        ).label('pass_accuracy'),
        _total(P.key_pass).label('key_passes'),
        _total(P.shots_on_target).label('shots_on_target'),
        _total(P.shots_off_target).label('shots_off_target'),
        _total(P.total_tackle).label('tackles'),
        _total(P.interception_won).label('interceptions'),
        _total(P.duel_won).label('duels_won'),
        _total(P.duel_lost).label('duels_lost'),
        _total(P.fouls).label('fouls_committed'),
        _total(P.was_fouled).label('fouls_won'),
        performance_score.label('performance_score'),
    )
    rows = _season_rows(query, season_id)\
        .filter(func.coalesce(P.minutes_played, 0) > 0)\
        .group_by(P.name, P.team_name, P.position, P.country_name)\
        .having(minutes >= MIN_MINUTES)\
        .order_by(performance_score.desc(), P.name.asc())\
        .limit(ALL_PLAYERS_LIMIT)\
        .all()
    return [row._asdict() for row in rows]


def get_player_details(season_id, player_name):
    """Season aggregate for one player as a one-row list, empty when they have no rows."""
    query = db.session.query(
        P.name.label('player_name'),
        P.team_name.label('team'),
        P.position.label('position'),
        P.country_name.label('country'),
        func.count().label('matches_played'),
        func.round(_avg_rating(), 2).label('avg_rating'),
        _total(P.goals).label('total_goals'),
        _total(P.goal_assist).label('total_assists'),
        _total(P.minutes_played).label('total_minutes'),
        func.round(func.avg(func.coalesce(P.minutes_played, 0.0)), 1).label('avg_minutes'),
        _total(P.shots_on_target).label('shots_on_target'),
        _total(P.shots_off_target).label('shots_off_target'),
        func.round(func.avg(_match_pass_accuracy()), 2).label('pass_accuracy'),
        _total(P.key_pass).label('key_passes'),
        _total(P.total_tackle).label('tackles'),
        _total(P.interception_won).label('interceptions'),
        _total(P.saves).label('saves'),
    )
    row = _season_rows(query, season_id)\
        .filter(P.name == player_name)\
        .group_by(P.name, P.team_name, P.position, P.country_name)\
        .order_by(func.count().desc())\
        .first()
    return [row._asdict()] if row else []


def get_player_matches(season_id, player_name):
    rows = db.session.query(
        Match.id.label('match_id'),
        Match.match_id.label('match_code'),
        MatchDetails.home_team.label('home_team'),
        MatchDetails.away_team.label('away_team'),
        MatchDetails.home_score.label('home_score'),
        MatchDetails.away_score.label('away_score'),
        MatchDetails.start_timestamp.label('match_timestamp'),
        MatchDetails.venue.label('venue'),
        P.team_name.label('teamName'),
        P.position.label('position'),
        P.jersey_number.label('jerseyNumber'),
        P.minutes_played.label('minutesPlayed'),
        P.rating.label('rating'),
        P.goals.label('goals'),
        P.goal_assist.label('goalAssist'),
        P.saves.label('saves'),
        literal(0).label('yellowCard'),
        literal(0).label('redCard'),
    ).select_from(Match)\
        .join(MatchDetails, MatchDetails.match_id == Match.match_id)\
        .join(P, P.match_id == Match.match_id)\
        .filter(Match.season_id == season_id, P.name == player_name)\
        .order_by(MatchDetails.start_timestamp.desc())\
        .all()
    return [row._asdict() for row in rows]


def suggest_player_names(season_id, player_name, threshold=80, limit=3):
    """Names in the season that look like player_name."""
    names = [n for (n,) in db.session.query(P.name).join(Match, Match.match_id == P.match_id)
             .filter(Match.season_id == season_id).distinct().all() if n]
    if not names:
        return []
    matches = fuzz_process.extract(player_name, names, limit=limit)
    return [name for name, score in matches if score >= threshold]


def _dream_team_score():
    aggregates = {
        'rating': _avg_rating(),
        'saves': _total(P.saves),
        'tackles': _total(P.total_tackle),
        'interceptions': _total(P.interception_won),
        'key_passes': _total(P.key_pass),
        'assists': _total(P.goal_assist),
        'goals': _total(P.goals),
    }
    whens = []
    for position, weights in DREAM_TEAM_WEIGHTS.items():
        score = None
        for stat, weight in weights:
            term = aggregates[stat] * weight
            score = term if score is None else score + term
        whens.append((P.position == position, func.round(score, 2)))
    return case(*whens, else_=func.round(aggregates['rating'], 2))


def get_dream_team(season_id):
    """Best XI of a season: top scorers per position under a fixed formation."""
    minutes = _total(P.minutes_played)
    performance = select(
        P.name.label('name'),
        P.team_name.label('team_name'),
        P.position.label('position'),
        minutes.label('total_minutes'),
        _dream_team_score().label('score'),
    ).join(Match, Match.match_id == P.match_id)\
        .where(Match.season_id == season_id)\
        .where(P.name.isnot(None), P.team_name.isnot(None), P.position.isnot(None))\
        .group_by(P.name, P.team_name, P.position)\
        .having(minutes >= DREAM_TEAM_MIN_MINUTES)\
        .subquery('player_performance')

    position_rank = func.row_number().over(
        partition_by=performance.c.position,
        order_by=(performance.c.score.desc(), performance.c.name.asc()),
    ).label('position_rank')
    ranked = select(performance, position_rank).subquery('ranked_players')

    picks = [
        and_(ranked.c.position == position, ranked.c.position_rank <= count)
        for position, count in DREAM_TEAM_FORMATION.items()
    ]
    display_order = case(
        {position: i for i, position in enumerate(DREAM_TEAM_FORMATION, start=1)},
        value=ranked.c.position,
    )

    rows = db.session.query(
        ranked.c.name.label('Player'),
        ranked.c.team_name.label('Team'),
        ranked.c.position.label('Position'),
        ranked.c.score.label('Score'),
        ranked.c.total_minutes.label('Minutes'),
    ).filter(or_(*picks))\
        .order_by(display_order, ranked.c.score.desc())\
        .all()
    return [row._asdict() for row in rows]
