from sqlalchemy import func
from sqlalchemy.orm import column_property

from leaguestats.extensions import db


class League(db.Model):
    __tablename__ = 'leagues'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    country = db.Column(db.String(100))
    logo_url = db.Column(db.String(255))
    seasons = db.relationship('Season', back_populates='league', lazy='dynamic')


class Season(db.Model):
    __tablename__ = 'seasons'
    id = db.Column(db.Integer, primary_key=True)
    season = db.Column(db.String(20), nullable=False)
    league_id = db.Column(db.Integer, db.ForeignKey('leagues.id'), nullable=False)
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    is_active = db.Column(db.Boolean, default=False)
    league = db.relationship('League', back_populates='seasons')
    matches = db.relationship('Match', back_populates='season', lazy='dynamic')


class Match(db.Model):
    __tablename__ = 'matches'
    id = db.Column(db.Integer, primary_key=True)
    match_id = db.Column(db.String(50), unique=True, nullable=False)  # feed key
    season_id = db.Column(db.Integer, db.ForeignKey('seasons.id'), nullable=False)
    status = db.Column(db.String(20), default='scheduled')
    season = db.relationship('Season', back_populates='matches')
    details = db.relationship('MatchDetails', back_populates='match', uselist=False, cascade="all, delete-orphan")
    player_stats = db.relationship('PlayerMatchStats', back_populates='match', cascade="all, delete-orphan", lazy='dynamic')


class MatchDetails(db.Model):
    """Raw feed payload for a match; scalar fields are read with JSON paths."""
    __tablename__ = 'match_details'
    id = db.Column(db.Integer, primary_key=True)
    match_id = db.Column(db.String(50), db.ForeignKey('matches.match_id'), unique=True, nullable=False)
    raw_json = db.Column(db.Text, nullable=False)

    home_team = column_property(func.json_extract(raw_json, '$.homeTeam.name'))
    away_team = column_property(func.json_extract(raw_json, '$.awayTeam.name'))
    home_score = column_property(db.cast(func.json_extract(raw_json, '$.homeScore.normaltime'), db.Integer))
    away_score = column_property(db.cast(func.json_extract(raw_json, '$.awayScore.normaltime'), db.Integer))
    start_timestamp = column_property(db.cast(func.json_extract(raw_json, '$.startTimestamp'), db.Integer))
    venue = column_property(func.json_extract(raw_json, '$.venue.name'))
    status = column_property(func.json_extract(raw_json, '$.status.type'))
    home_manager = column_property(func.json_extract(raw_json, '$.homeTeam.manager.name'))
    away_manager = column_property(func.json_extract(raw_json, '$.awayTeam.manager.name'))

    match = db.relationship('Match', back_populates='details')


class PlayerMatchStats(db.Model):
    # Column names follow the feed's camelCase keys
    __tablename__ = 'player_match_stats'
    id = db.Column(db.Integer, primary_key=True)
    match_id = db.Column(db.String(50), db.ForeignKey('matches.match_id'), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    short_name = db.Column('shortName', db.String(100))
    team_name = db.Column('teamName', db.String(100), nullable=False)
    position = db.Column(db.String(5), nullable=False)  # G, D, M, F
    jersey_number = db.Column('jerseyNumber', db.Integer)
    country = db.Column(db.Text)  # JSON object, '$.name' is the nationality
    rating = db.Column(db.Float)
    minutes_played = db.Column('minutesPlayed', db.Integer)
    goals = db.Column(db.Integer, default=0)
    goal_assist = db.Column('goalAssist', db.Integer, default=0)
    shots_on_target = db.Column('onTargetScoringAttempt', db.Integer, default=0)
    shots_off_target = db.Column('shotOffTarget', db.Integer, default=0)
    shots_blocked = db.Column('blockedScoringAttempt', db.Integer, default=0)
    key_pass = db.Column('keyPass', db.Integer, default=0)
    total_pass = db.Column('totalPass', db.Integer, default=0)
    accurate_pass = db.Column('accuratePass', db.Integer, default=0)
    total_tackle = db.Column('totalTackle', db.Integer, default=0)
    interception_won = db.Column('interceptionWon', db.Integer, default=0)
    duel_won = db.Column('duelWon', db.Integer, default=0)
    duel_lost = db.Column('duelLost', db.Integer, default=0)
    outfielder_block = db.Column('outfielderBlock', db.Integer, default=0)
    fouls = db.Column(db.Integer, default=0)
    was_fouled = db.Column('wasFouled', db.Integer, default=0)
    saves = db.Column(db.Integer, default=0)

    country_name = column_property(func.json_extract(country, '$.name'))

    match = db.relationship('Match', back_populates='player_stats')
