"""
Per-candidate scoring: weighted tag overlap with the profile plus a random term.

Builds a ScoredArtist for one candidate given the aggregated profile and config.
"""

from ...models.artist import Artist
from ...models.config import RecommendationConfig
from ...models.profile import PreferenceProfile
from ...models.scoring import ScoredArtist
from ...utils.random_source import RandomSource


def score_artist(
    artist: Artist,
    profile: PreferenceProfile,
    rng: RandomSource,
    config: RecommendationConfig,
) -> ScoredArtist:
    """
    Score one candidate against the profile.

    final = weight_genre * Σ genres[g] + weight_theme * Σ themes[t]
            + weight_style * Σ styles[s] + weight_era * eras[era] + U(0, jitter_max)

    The jitter is a fresh draw per call; it is what keeps ties and near-ties
    from producing the same list every cycle.
    """
    genre = config.weight_genre * sum(profile.genre_weight(g) for g in artist.genres)
    theme = config.weight_theme * sum(profile.theme_weight(t) for t in artist.themes)
    style = config.weight_style * sum(profile.style_weight(s) for s in artist.styles)
    era = config.weight_era * profile.era_weight(artist.era)
    jitter = rng.uniform(0.0, config.jitter_max) if config.jitter_max > 0 else 0.0
    return ScoredArtist(
        artist=artist,
        genre_score=genre,
        theme_score=theme,
        style_score=style,
        era_score=era,
        jitter=jitter,
        final_score=genre + theme + style + era + jitter,
    )
