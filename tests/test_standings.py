from leaguestats.services import get_league_standings, get_season_stats, get_team_points_progress


def _by_team(rows):
    return {row['Team']: row for row in rows}


def test_record_counts_home_and_away_perspectives(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1)
    add_match('Bravo', 'Alpha', 3, 0)

    table = _by_team(get_league_standings(season.id))
    alpha = table['Alpha']

    assert (alpha['Played'], alpha['Won'], alpha['Drawn'], alpha['Lost']) == (2, 1, 0, 1)
    assert alpha['Goals For'] == 2
    assert alpha['Goals Against'] == 4
    assert alpha['Goal Difference'] == -2
    assert alpha['Points'] == 3
    assert table['Bravo']['Goal Difference'] == 2


def test_level_on_points_sorted_by_goal_difference(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1)
    add_match('Bravo', 'Alpha', 3, 0)

    teams = [row['Team'] for row in get_league_standings(season.id)]
    assert teams == ['Bravo', 'Alpha']


def test_ordering_is_points_then_goal_difference_then_goals_for(season, add_match):
    add_match('Alpha', 'Delta', 1, 0)
    add_match('Bravo', 'Delta', 3, 2)
    add_match('Charlie', 'Delta', 2, 1)
    add_match('Echo', 'Delta', 4, 0)
    add_match('Delta', 'Foxtrot', 1, 1)
    add_match('Golf', 'Hotel', 0, 0)

    rows = get_league_standings(season.id)
    keys = [(r['Points'], r['Goal Difference'], r['Goals For']) for r in rows]

    assert keys == sorted(keys, key=lambda k: (-k[0], -k[1], -k[2]))
    teams = [r['Team'] for r in rows]
    # Echo +4; then +1 for Alpha, Bravo, Charlie split by goals scored
    assert teams[:4] == ['Echo', 'Bravo', 'Charlie', 'Alpha']


def test_draws_are_worth_one_point(season, add_match):
    add_match('Alpha', 'Bravo', 1, 1)

    table = _by_team(get_league_standings(season.id))
    assert table['Alpha']['Points'] == 1
    assert table['Bravo']['Drawn'] == 1


def test_form_lists_most_recent_result_first(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1, timestamp=100)
    add_match('Bravo', 'Alpha', 3, 0, timestamp=200)
    add_match('Alpha', 'Bravo', 1, 1, timestamp=300)

    table = _by_team(get_league_standings(season.id))
    assert table['Alpha']['Form'] == '⚪🔴🟢'
    assert table['Bravo']['Form'] == '⚪🟢🔴'


def test_form_keeps_only_last_five(season, add_match):
    for i in range(7):
        add_match('Alpha', f'Opponent {i}', 1, 0, timestamp=100 + i)
    add_match('Alpha', 'Bravo', 0, 2, timestamp=1000)

    form = _by_team(get_league_standings(season.id))['Alpha']['Form']
    assert len(form) == 5
    assert form == '🔴🟢🟢🟢🟢'


def test_unplayed_fixtures_are_left_out(season, add_match):
    add_match('Alpha', 'Bravo', 2, 0)
    add_match('Alpha', 'Charlie', None, None)

    table = _by_team(get_league_standings(season.id))
    assert 'Charlie' not in table
    assert table['Alpha']['Played'] == 1


def test_standings_scoped_to_season(app, season, add_match):
    from leaguestats.extensions import db
    from leaguestats.models import Season

    other = Season(season='2023-24', league_id=season.league_id)
    db.session.add(other)
    db.session.commit()

    add_match('Alpha', 'Bravo', 2, 0)
    add_match('Charlie', 'Delta', 5, 0, season_id=other.id)

    teams = {row['Team'] for row in get_league_standings(season.id)}
    assert teams == {'Alpha', 'Bravo'}


def test_season_stats_summary(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1)
    add_match('Bravo', 'Alpha', 3, 0)
    add_match('Charlie', 'Alpha', 0, 1)
    add_match('Bravo', 'Charlie', 1, 1)

    stats = get_season_stats(season.id)
    assert stats == {
        'total_matches': 4,
        'total_goals': 9,
        'avg_goals_per_match': 2.25,
        'home_wins': 2,
        'away_wins': 1,
        'draws': 1,
    }


def test_season_stats_for_empty_season(season):
    stats = get_season_stats(season.id)
    assert stats['total_matches'] == 0
    assert stats['total_goals'] == 0
    assert stats['avg_goals_per_match'] == 0.0


def test_points_progress_is_cumulative(season, add_match):
    add_match('Alpha', 'Bravo', 2, 1, timestamp=100)
    add_match('Bravo', 'Alpha', 1, 1, timestamp=200)
    add_match('Alpha', 'Bravo', 0, 1, timestamp=300)

    progress = get_team_points_progress(season.id)
    alpha = [row['points'] for row in progress if row['team'] == 'Alpha']
    bravo = [row['points'] for row in progress if row['team'] == 'Bravo']

    assert alpha == [3, 4, 4]
    assert bravo == [0, 1, 4]
    assert [row['match_timestamp'] for row in progress] == sorted(row['match_timestamp'] for row in progress)
