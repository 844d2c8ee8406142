from flask import Blueprint, request

from leaguestats import services
from leaguestats.utils import InvalidParameter, api_endpoint, api_response, error_response, parse_id, parse_limit

bp = Blueprint('leagues', __name__, url_prefix='/api/leagues')


@bp.route('/', methods=['GET'], strict_slashes=False)
@api_endpoint('Failed to fetch leagues')
def all_leagues():
    return api_response('Leagues retrieved successfully', services.get_all_leagues())


@bp.route('/<league_id>/seasons', methods=['GET'])
@api_endpoint('Failed to fetch seasons')
def seasons(league_id):
    league_id = parse_id(league_id, 'league')
    return api_response('Seasons retrieved successfully', services.get_seasons_by_league(league_id))


@bp.route('/seasons/<season_id>/standings', methods=['GET'])
@api_endpoint('Failed to fetch standings')
def standings(season_id):
    season_id = parse_id(season_id, 'season')
    return api_response('Standings retrieved successfully', services.get_league_standings(season_id))


@bp.route('/seasons/<season_id>/stats', methods=['GET'])
@api_endpoint('Failed to fetch season stats')
def season_stats(season_id):
    season_id = parse_id(season_id, 'season')
    return api_response('Season stats retrieved successfully', services.get_season_stats(season_id))


@bp.route('/seasons/<season_id>/points-progress', methods=['GET'])
@api_endpoint('Failed to fetch team points progress')
def points_progress(season_id):
    season_id = parse_id(season_id, 'season')
    return api_response('Team points progress retrieved successfully',
                        services.get_team_points_progress(season_id))


@bp.route('/seasons/<season_id>/players', methods=['GET'])
@api_endpoint('Failed to fetch player stats')
def player_stats(season_id):
    season_id = parse_id(season_id, 'season')
    limit = parse_limit(request.args.get('limit'), 50)
    return api_response('Player stats retrieved successfully', services.get_player_stats(season_id, limit))


@bp.route('/seasons/<season_id>/players/all', methods=['GET'])
@api_endpoint('Failed to fetch all players')
def all_players(season_id):
    season_id = parse_id(season_id, 'season')
    return api_response('All players retrieved successfully', services.get_all_players(season_id))


@bp.route('/seasons/<season_id>/players/position/<position>', methods=['GET'])
@api_endpoint('Failed to fetch players by position')
def players_by_position(season_id, position):
    season_id = parse_id(season_id, 'season')
    limit = parse_limit(request.args.get('limit'), 20)
    return api_response('Players by position retrieved successfully',
                        services.get_players_by_position(season_id, position, limit))


@bp.route('/seasons/<season_id>/players/team/<team_name>', methods=['GET'])
@api_endpoint('Failed to fetch players by team')
def players_by_team(season_id, team_name):
    season_id = parse_id(season_id, 'season')
    return api_response('Players by team retrieved successfully',
                        services.get_players_by_team(season_id, team_name))


@bp.route('/seasons/<season_id>/player/<player_name>', methods=['GET'])
@api_endpoint('Failed to fetch player details')
def player_details(season_id, player_name):
    season_id = parse_id(season_id, 'season')
    details = services.get_player_details(season_id, player_name)
    if not details:
        suggestions = services.suggest_player_names(season_id, player_name)
        message = f'No appearances found for {player_name}'
        if suggestions:
            message += f". Did you mean '{suggestions[0]}'?"
        return error_response(message, error={'suggestions': suggestions}, status=404)
    return api_response('Player details retrieved successfully', details)


@bp.route('/seasons/<season_id>/player/<player_name>/matches', methods=['GET'])
@api_endpoint('Failed to fetch player matches')
def player_matches(season_id, player_name):
    season_id = parse_id(season_id, 'season')
    return api_response('Player matches retrieved successfully',
                        services.get_player_matches(season_id, player_name))


@bp.route('/seasons/<season_id>/dream-team', methods=['GET'])
@api_endpoint('Failed to fetch dream team')
def dream_team(season_id):
    season_id = parse_id(season_id, 'season')
    return api_response('Dream team retrieved successfully', services.get_dream_team(season_id))


@bp.route('/seasons/<season_id>/match-details', methods=['GET'])
@api_endpoint('Failed to fetch match details')
def match_details(season_id):
    season_id = parse_id(season_id, 'season')
    home_team = request.args.get('homeTeam', '').strip()
    away_team = request.args.get('awayTeam', '').strip()
    if not home_team or not away_team:
        raise InvalidParameter('Home team and away team are required')
    return api_response('Match details retrieved successfully',
                        services.get_match_details(season_id, home_team, away_team))


@bp.route('/seasons/<season_id>/team/<team_name>/details', methods=['GET'])
@api_endpoint('Failed to fetch team details')
def team_details(season_id, team_name):
    season_id = parse_id(season_id, 'season')
    details = services.get_team_details(season_id, team_name)
    if details is None:
        return error_response(f'No matches found for {team_name}', status=404)
    return api_response('Team details retrieved successfully', details)


@bp.route('/seasons/<season_id>/team/<team_name>/matches', methods=['GET'])
@api_endpoint('Failed to fetch team matches')
def team_matches(season_id, team_name):
    season_id = parse_id(season_id, 'season')
    return api_response('Team matches retrieved successfully', services.get_team_matches(season_id, team_name))


@bp.route('/match/<match_id>/teams', methods=['GET'])
@api_endpoint('Failed to fetch match teams')
def match_teams(match_id):
    return api_response('Match teams retrieved successfully', services.get_match_teams(match_id))
