from types import MappingProxyType

# Concept key -> related terms. A term may sit under several keys and is
# looked up in both directions by the synonym expander.
SYNONYM_MAP = MappingProxyType({
    # Technology terms
    'tech': ('technology', 'technical', 'digital', 'software', 'hardware', 'computing', 'programming', 'coding', 'development'),
    'ai': ('artificial intelligence', 'machine learning', 'ml', 'neural network', 'deep learning', 'automation', 'bot', 'algorithm'),
    'dev': ('development', 'developer', 'programming', 'coding', 'software', 'engineering'),
    'code': ('coding', 'programming', 'development', 'software', 'script', 'algorithm'),
    'app': ('application', 'software', 'program', 'mobile', 'web app', 'platform', 'tool'),

    # Business terms
    'biz': ('business', 'company', 'corporate', 'enterprise', 'startup', 'entrepreneur'),
    'startup': ('business', 'entrepreneur', 'venture', 'company', 'innovation', 'founder'),
    'money': ('finance', 'financial', 'investment', 'revenue', 'profit', 'economy', 'economic'),
    'finance': ('financial', 'money', 'investment', 'banking', 'economy', 'market'),

    # Sports terms
    'sports': ('sport', 'athletic', 'game', 'competition', 'player', 'team', 'match', 'tournament'),
    'ball': ('basketball', 'football', 'soccer', 'baseball', 'tennis', 'volleyball'),
    'game': ('match', 'competition', 'contest', 'tournament', 'sport', 'play'),

    # Art & Design terms
    'art': ('artistic', 'design', 'creative', 'visual', 'aesthetic', 'painting', 'drawing', 'illustration'),
    'design': ('designer', 'creative', 'visual', 'ui', 'ux', 'graphic', 'aesthetic', 'style'),
    'creative': ('creativity', 'art', 'design', 'innovative', 'original', 'artistic'),

    # Health terms
    'health': ('healthy', 'wellness', 'medical', 'fitness', 'exercise', 'nutrition', 'healthcare'),
    'fitness': ('exercise', 'workout', 'training', 'gym', 'health', 'physical', 'sport'),

    # Education terms
    'learn': ('learning', 'education', 'study', 'knowledge', 'teaching', 'training', 'skill'),
    'education': ('learning', 'school', 'university', 'teaching', 'academic', 'study'),

    # Entertainment terms
    'movie': ('film', 'cinema', 'entertainment', 'hollywood', 'actor', 'director'),
    'music': ('song', 'artist', 'musician', 'band', 'album', 'concert', 'audio'),
    'show': ('tv', 'television', 'series', 'episode', 'program', 'entertainment'),

    # Travel & food terms
    'travel': ('trip', 'vacation', 'journey', 'destination', 'tourism', 'explore', 'adventure'),
    'food': ('cuisine', 'restaurant', 'cooking', 'recipe', 'meal', 'dining', 'culinary'),

    # Science terms
    'science': ('scientific', 'research', 'study', 'experiment', 'discovery', 'innovation'),
    'climate': ('environment', 'weather', 'global warming', 'sustainability', 'green', 'eco'),

    # Social terms
    'social': ('community', 'people', 'society', 'culture', 'relationship', 'network'),
    'news': ('current events', 'breaking', 'update', 'announcement', 'report', 'journalism'),
})

STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with',
    'by', 'is', 'are', 'was', 'were', 'be', 'been', 'have', 'has', 'had', 'do', 'does',
    'did', 'will', 'would', 'could', 'should', 'may', 'might', 'can', 'this', 'that',
    'these', 'those', 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her',
    'us', 'them', 'my', 'your', 'his', 'its', 'our', 'their',
])

# Shown to the chat model when there is nothing to build context from
NO_POSTS_MESSAGE = (
    "I don't have any posts to analyze yet. "
    "Please import some posts first to ask questions about them."
)
