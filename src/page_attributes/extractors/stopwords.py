"""English stop words ignored by the keyword analyzer."""

STOPWORDS_EN = frozenset({
    "a", "about", "above", "across", "after", "afterwards", "again", "against", "all", "almost", "alone",
    "along", "already", "also", "although", "always", "am", "among", "an", "and", "another", "any", "anyone",
    "anything", "anyway", "are", "around", "as", "at", "back", "be", "became", "because", "become", "been",
    "before", "being", "below", "between", "both", "but", "by", "can", "cannot", "could", "did", "do", "does",
    "doing", "done", "down", "during", "each", "either", "else", "enough", "etc", "even", "ever", "every",
    "few", "for", "from", "further", "get", "gets", "got", "had", "has", "have", "having", "he", "her", "here",
    "hers", "herself", "him", "himself", "his", "how", "however", "i", "if", "in", "into", "is", "it", "its",
    "itself", "just", "last", "least", "less", "let", "like", "made", "make", "many", "may", "me", "might",
    "more", "most", "much", "must", "my", "myself", "neither", "never", "new", "next", "no", "nor", "not",
    "now", "of", "off", "often", "on", "once", "one", "only", "onto", "or", "other", "others", "our", "ours",
    "ourselves", "out", "over", "own", "per", "perhaps", "quite", "rather", "really", "said", "same", "say",
    "says", "see", "seem", "seems", "she", "should", "since", "so", "some", "something", "still", "such",
    "than", "that", "the", "their", "theirs", "them", "themselves", "then", "there", "these", "they", "this",
    "those", "though", "through", "thus", "to", "too", "under", "until", "up", "upon", "us", "use", "used",
    "using", "very", "via", "was", "way", "we", "well", "were", "what", "whatever", "when", "where", "whether",
    "which", "while", "who", "whom", "whose", "why", "will", "with", "within", "without", "would", "yes", "yet",
    "you", "your", "yours", "yourself", "yourselves",
    # contractions as they survive tokenization
    "can't", "don't", "doesn't", "didn't", "isn't", "it's", "i'm", "i've", "i'll", "i'd", "won't", "wouldn't",
    "you're", "you've", "we're", "they're", "that's", "there's", "let's", "shouldn't", "couldn't", "wasn't",
    "aren't", "haven't", "hasn't",
})
