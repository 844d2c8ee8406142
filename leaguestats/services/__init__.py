from leaguestats.services.leagues import get_all_leagues, get_seasons_by_league
from leaguestats.services.standings import get_league_standings, get_season_stats, get_team_points_progress
from leaguestats.services.players import (
    get_player_stats,
    get_all_players,
    get_players_by_position,
    get_players_by_team,
    get_player_details,
    get_player_matches,
    get_dream_team,
    suggest_player_names,
)
from leaguestats.services.teams import get_team_details, get_team_matches, get_match_details, get_match_teams
from leaguestats.services.seed import seed_demo_data
