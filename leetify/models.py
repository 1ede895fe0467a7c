"""Pydantic models for Leetify API response data."""

from datetime import datetime
from typing import Optional, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import DataSource


class LeetifyModel(BaseModel):
    """Base for response models; unknown keys from the API are ignored."""

    model_config = ConfigDict(extra="ignore")


class PlatformBan(LeetifyModel):
    """Ban recorded on a third-party platform."""

    platform: str
    platform_nickname: str
    banned_since: datetime


class CompetitiveRank(LeetifyModel):
    """Per-map competitive rank."""

    map_name: str
    rank: int


class Ranks(LeetifyModel):
    """Ranks across Leetify and the platforms it tracks."""

    leetify: Optional[float] = None
    premier: Optional[int] = None
    faceit: Optional[int] = None
    faceit_elo: Optional[int] = None
    wingman: Optional[int] = None
    renown: Optional[int] = None
    competitive: List[CompetitiveRank]


class Rating(LeetifyModel):
    """Leetify rating breakdown."""

    aim: float
    positioning: float
    utility: float
    clutch: float
    opening: float
    ct_leetify: float
    t_leetify: float


class ProfileStats(LeetifyModel):
    """Aggregated profile statistics."""

    accuracy_enemy_spotted: float
    accuracy_head: float
    counter_strafing_good_shots_ratio: float
    ct_opening_aggression_success_rate: float
    ct_opening_duel_success_percentage: float
    flashbang_hit_foe_avg_duration: float
    flashbang_hit_foe_per_flashbang: float
    flashbang_hit_friend_per_flashbang: float
    flashbang_leading_to_kill: float
    flashbang_thrown: float
    he_foes_damage_avg: float
    he_friends_damage_avg: float
    preaim: float
    reaction_time_ms: float
    spray_accuracy: float
    t_opening_aggression_success_rate: float
    t_opening_duel_success_percentage: float
    traded_deaths_success_percentage: float
    trade_kill_opportunities_per_round: float
    trade_kills_success_percentage: float
    utility_on_death_avg: float


class RecentMatch(LeetifyModel):
    """Match entry embedded in a profile."""

    id: str
    finished_at: datetime
    data_source: str
    outcome: str
    rank: int
    rank_type: Optional[int] = None
    map_name: str
    leetify_rating: float
    score: Tuple[int, int]
    preaim: float
    reaction_time_ms: int
    accuracy_enemy_spotted: float
    accuracy_head: float
    spray_accuracy: float

    @property
    def source(self) -> Union[DataSource, str]:
        """Data source as enum when known."""
        return DataSource.parse(self.data_source)


class RecentTeammate(LeetifyModel):
    """Teammate seen in recent matches."""

    steam64_id: str
    recent_matches_count: int


class Profile(LeetifyModel):
    """Player profile."""

    privacy_mode: str
    winrate: float
    total_matches: int
    first_match_date: Optional[datetime] = None
    name: str
    bans: List[PlatformBan]
    steam64_id: str
    id: Optional[str] = None
    ranks: Ranks
    rating: Rating
    stats: ProfileStats
    recent_matches: List[RecentMatch]
    recent_teammates: List[RecentTeammate]


class TeamScore(LeetifyModel):
    """Final score of one team."""

    team_number: int
    score: int


class PlayerStats(LeetifyModel):
    """Statistics of one player in a match."""

    steam64_id: str
    name: str
    mvps: int
    preaim: float
    reaction_time: float
    accuracy: float
    accuracy_enemy_spotted: float
    accuracy_head: float
    shots_fired_enemy_spotted: int
    shots_fired: int
    shots_hit_enemy_spotted: int
    shots_hit_friend: int
    shots_hit_friend_head: int
    shots_hit_foe: int
    shots_hit_foe_head: int
    utility_on_death_avg: float
    he_foes_damage_avg: float
    he_friends_damage_avg: float
    he_thrown: int
    molotov_thrown: int
    smoke_thrown: int
    counter_strafing_shots_all: int
    counter_strafing_shots_bad: int
    counter_strafing_shots_good: int
    counter_strafing_shots_good_ratio: float
    flashbang_hit_foe: int
    flashbang_leading_to_kill: int
    flashbang_hit_foe_avg_duration: float
    flashbang_hit_friend: int
    flashbang_thrown: int
    flash_assist: int
    score: int
    initial_team_number: int
    spray_accuracy: float
    total_kills: int
    total_deaths: int
    kd_ratio: float
    rounds_survived: int
    rounds_survived_percentage: float
    dpr: float
    total_assists: int
    total_damage: int
    leetify_rating: Optional[float] = None
    ct_leetify_rating: Optional[float] = None
    t_leetify_rating: Optional[float] = None
    multi1k: int
    multi2k: int
    multi3k: int
    multi4k: int
    multi5k: int
    rounds_count: int
    rounds_won: int
    rounds_lost: int
    total_hs_kills: int
    trade_kill_opportunities: int
    trade_kill_attempts: int
    trade_kills_succeed: int
    trade_kill_attempts_percentage: float
    trade_kills_success_percentage: float
    trade_kill_opportunities_per_round: float
    traded_death_opportunities: int
    traded_death_attempts: int
    traded_deaths_succeed: int
    traded_death_attempts_percentage: float
    traded_deaths_success_percentage: float
    traded_deaths_opportunities_per_round: float


class MatchSummary(LeetifyModel):
    """Match entry of a player's match history."""

    id: str
    finished_at: datetime
    data_source: str
    data_source_match_id: str
    map_name: str
    has_banned_player: bool
    team_scores: Tuple[TeamScore, TeamScore]
    stats: List[PlayerStats] = Field(default_factory=list)

    @property
    def source(self) -> Union[DataSource, str]:
        """Data source as enum when known."""
        return DataSource.parse(self.data_source)


class MatchDetails(MatchSummary):
    """Complete match data."""

    stats: List[PlayerStats]

    def player(self, steam64_id: str) -> Optional[PlayerStats]:
        """Get a participant's stats by Steam64 id."""
        for entry in self.stats:
            if entry.steam64_id == steam64_id:
                return entry
        return None
