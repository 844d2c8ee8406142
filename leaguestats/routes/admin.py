from flask import Blueprint

from leaguestats.models import League, Season, Match, MatchDetails, PlayerMatchStats
from leaguestats.utils import api_endpoint, api_response

bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@bp.route('/dashboard', methods=['GET'])
@api_endpoint('Failed to load admin dashboard')
def dashboard():
    counts = {
        'leagues': League.query.count(),
        'seasons': Season.query.count(),
        'matches': Match.query.count(),
        'match_details': MatchDetails.query.count(),
        'player_match_stats': PlayerMatchStats.query.count(),
    }
    return api_response('Admin dashboard active', counts)


@bp.route('/test', methods=['GET'])
@api_endpoint('Admin test endpoint failed')
def test():
    return api_response('Admin test endpoint working')
