from leaguestats.services import get_match_details, get_match_teams, get_team_details, get_team_matches


def test_team_details(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1)
    add_match('Bravo', 'Alpha', 3, 0)

    details = get_team_details(season.id, 'Alpha')
    assert details['total_matches'] == 2
    assert (details['wins'], details['draws'], details['losses']) == (1, 0, 1)
    assert details['goals_for'] == 2
    assert details['goals_against'] == 4
    assert details['goal_difference'] == -2
    assert details['points'] == 3
    assert details['win_percentage'] == 50.0


def test_team_details_unknown_team(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1)
    assert get_team_details(season.id, 'Zulu') is None


def test_team_matches_results_and_venues(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1, timestamp=100)
    add_match('Bravo', 'Alpha', 3, 0, timestamp=200)
    add_match('Charlie', 'Alpha', 1, 1, timestamp=300)
    add_match('Alpha', 'Charlie', None, None, timestamp=400)

    matches = get_team_matches(season.id, 'Alpha')

    assert [m['match_timestamp'] for m in matches] == [400, 300, 200, 100]
    assert [m['result'] for m in matches] == [None, 'D', 'L', 'W']
    assert [m['team_venue'] for m in matches] == ['home', 'away', 'away', 'home']
    assert matches[0]['match_status'] == 'notstarted'


def test_match_details_decodes_payload(season, add_match):
    match_id = add_match('Alpha', 'Bravo', 2, 1, venue='North Park')
    add_match('Bravo', 'Alpha', 0, 0)

    matches = get_match_details(season.id, 'Alpha', 'Bravo')

    assert len(matches) == 1
    match = matches[0]
    assert match['match_id'] == match_id
    assert (match['home_score'], match['away_score']) == (2, 1)
    assert match['match_data']['venue']['name'] == 'North Park'
    assert match['match_data']['homeTeam']['manager']['name'] == 'Alpha Manager'


def test_match_details_with_no_meeting(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1)
    assert get_match_details(season.id, 'Bravo', 'Charlie') == []


def test_match_teams(season, add_match):
    match_id = add_match('Alpha', 'Bravo', 2, 1, timestamp=555)

    teams = get_match_teams(match_id)
    assert teams == [{
        'home_team': 'Alpha',
        'away_team': 'Bravo',
        'home_score': 2,
        'away_score': 1,
        'match_timestamp': 555,
    }]
    assert get_match_teams('missing') == []
