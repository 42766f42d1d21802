ENGLISH_STOPWORDS = frozenset({
    # articles, prepositions, pronouns
    "a", "an", "the", "and", "or", "but", "nor", "in", "on", "at", "to", "for", "of", "with", "by", "from",
    "about", "into", "through", "over", "under", "above", "below", "up", "down", "out", "off", "away",
    "back", "here", "there", "i", "me", "my", "we", "us", "our", "ours", "you", "your", "yours", "he",
    "him", "his", "she", "her", "hers", "it", "its", "they", "them", "their", "theirs", "this", "that",
    "these", "those", "who", "whom", "whose", "which", "what", "myself", "yourself", "herself", "himself",
    "itself", "themselves", "someone", "anyone", "everyone", "everybody", "everything", "whatever",

    # auxiliaries and common verbs
    "is", "am", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can", "shall",
    "go", "goes", "went", "gone", "get", "gets", "got", "gotten", "make", "makes", "made",
    "take", "takes", "took", "taken", "come", "comes", "came", "see", "sees", "saw", "seen",
    "know", "knows", "knew", "use", "uses", "used", "work", "works", "worked", "help", "helps", "helped",
    "create", "creates", "created", "build", "builds", "built", "find", "finds", "found",
    "think", "thinks", "thought", "feel", "feels", "felt", "look", "looks", "looked",
    "seem", "seems", "seemed", "become", "becomes", "became", "leave", "leaves", "left",
    "try", "tries", "tried", "ask", "asks", "asked", "need", "needs", "needed", "want", "wants", "wanted",
    "turn", "turns", "turned", "start", "starts", "started", "show", "shows", "showed", "shown",
    "play", "plays", "played", "run", "runs", "ran", "move", "moves", "moved", "live", "lives", "lived",
    "believe", "believes", "believed", "provide", "provides", "provided", "include", "includes", "included",
    "continue", "continues", "continued", "set", "sets", "remain", "remains", "remained",
    "add", "adds", "added", "change", "changes", "changed", "lead", "leads", "led",
    "understand", "understands", "understood", "follow", "follows", "followed", "stop", "stops", "stopped",
    "read", "reads", "open", "opens", "opened", "walk", "walks", "walked", "talk", "talks", "talked",
    "speak", "speaks", "spoke", "spoken", "allow", "allows", "allowed", "win", "wins", "won",
    "offer", "offers", "offered", "remember", "remembers", "remembered", "love", "loves", "loved",
    "consider", "considers", "considered", "appear", "appears", "appeared", "buy", "buys", "bought",
    "wait", "waits", "waited", "serve", "serves", "served", "send", "sends", "sent",
    "expect", "expects", "expected", "stay", "stays", "stayed", "let", "lets",
    "begin", "begins", "began", "begun", "keep", "keeps", "kept", "learn", "learns", "learned",
    "decide", "decides", "decided", "develop", "develops", "developed", "carry", "carries", "carried",
    "break", "breaks", "broke", "broken", "reach", "reaches", "reached", "tell", "tells", "told",
    "increase", "increases", "increased", "return", "returns", "returned", "explain", "explains", "explained",
    "focus", "focuses", "focused", "choose", "chooses", "chose", "chosen",
    "compare", "compares", "compared", "implement", "track", "automate", "analyze", "identify",
    "enhance", "improve", "boost", "avoid", "evaluate", "explore", "check", "review", "note",

    # -ing forms that open sentences and list items
    "making", "doing", "going", "coming", "getting", "having", "saying", "knowing", "thinking",
    "looking", "becoming", "leaving", "trying", "asking", "needing", "wanting", "turning", "starting",
    "showing", "playing", "running", "moving", "living", "holding", "bringing", "happening", "writing",
    "providing", "sitting", "standing", "losing", "paying", "meeting", "including", "continuing",
    "setting", "remaining", "adding", "changing", "leading", "understanding", "watching", "following",
    "stopping", "reading", "opening", "talking", "speaking", "allowing", "winning", "offering",
    "considering", "buying", "waiting", "serving", "sending", "expecting", "staying", "letting",
    "beginning", "keeping", "learning", "deciding", "developing", "carrying", "breaking", "reaching",
    "telling", "increasing", "returning", "explaining", "focusing", "choosing", "comparing", "using",
    "working", "helping", "creating", "building", "feeling", "seeming", "defining", "mapping",

    # common nouns
    "time", "person", "year", "way", "day", "thing", "man", "world", "life", "hand", "part", "child",
    "eye", "woman", "place", "week", "case", "point", "government", "number", "fact", "money", "story",
    "lot", "water", "book", "month", "right", "study", "people", "word", "issue", "side", "kind", "head",
    "house", "area", "country", "question", "school", "interest", "state", "power", "policy", "line",
    "music", "market", "name", "idea", "body", "information", "parent", "face", "others", "level",
    "office", "door", "health", "art", "war", "history", "party", "result", "results", "morning",
    "reason", "research", "moment", "air", "force", "education", "job", "end", "community", "program",
    "home", "room", "age", "sense", "nation", "plan", "course", "effect", "class", "control", "care",
    "field", "role", "effort", "rate", "heart", "leader", "voice", "mind", "price", "decision", "view",
    "relationship", "town", "road", "value", "action", "model", "season", "society", "tax", "director",
    "position", "player", "record", "paper", "space", "ground", "event", "matter", "center", "couple",
    "site", "project", "base", "activity", "star", "table", "court", "half", "situation", "industry",
    "figure", "street", "picture", "practice", "piece", "land", "doctor", "wall", "worker", "news",
    "test", "movie", "step", "type", "attention", "film", "source", "century", "evidence", "window",
    "culture", "chance", "energy", "period", "summer", "plant", "opportunity", "term", "letter",
    "condition", "choice", "rule", "floor", "material", "population", "economy", "risk", "future",
    "defense", "bank", "board", "subject", "officer", "rest", "behavior", "fight", "goal", "order",
    "author", "agency", "nature", "color", "store", "sound", "movement", "language", "response",
    "factor", "decade", "article", "scene", "stock", "career", "treatment", "approach", "size", "fund",
    "sign", "thought", "success", "amount", "ability", "staff", "character", "growth", "degree",
    "region", "television", "box", "training", "trade", "feeling", "standard", "bill", "lawyer",
    "section", "skill", "operation", "stage", "authority", "sort", "act", "strategy", "truth",
    "example", "examples", "environment", "executive", "manager", "theory", "impact", "statement",
    "direction", "employee", "structure", "production", "trip", "evening", "conference", "unit",
    "style", "range", "edge", "writer", "trouble", "challenge", "institution", "property", "stuff",
    "overview", "summary", "conclusion", "introduction", "option", "options", "alternative",
    "alternatives", "pros", "cons", "step", "steps", "tip", "tips", "breakdown", "categories",
    "today", "tomorrow", "yesterday", "monday", "tuesday", "wednesday", "thursday", "friday",
    "saturday", "sunday", "january", "february", "march", "april", "june", "july", "august",
    "september", "october", "november", "december",

    # adjectives and adverbs that get capitalized at sentence start
    "new", "old", "good", "bad", "small", "large", "big", "little", "long", "short", "high", "low",
    "next", "last", "first", "second", "third", "early", "late", "young", "important", "social",
    "political", "national", "local", "great", "real", "different", "same", "own", "current",
    "available", "total", "general", "recent", "human", "black", "white", "red", "blue", "green",
    "yellow", "orange", "purple", "brown", "pink", "gray", "clear", "dark", "light", "bright", "full",
    "empty", "closed", "free", "cheap", "expensive", "rich", "poor", "clean", "easy", "hard", "simple",
    "complex", "fast", "slow", "quick", "strong", "weak", "heavy", "hot", "cold", "warm", "cool",
    "safe", "ready", "sure", "possible", "impossible", "necessary", "special", "certain", "similar",
    "various", "several", "many", "few", "much", "enough", "more", "most", "less", "least", "all",
    "some", "any", "no", "not", "every", "each", "other", "another", "both", "either", "neither",
    "such", "very", "too", "quite", "rather", "pretty", "really", "truly", "certainly", "probably",
    "perhaps", "maybe", "actually", "especially", "particularly", "generally", "usually", "normally",
    "often", "sometimes", "always", "never", "still", "yet", "already", "again", "once", "twice",
    "together", "alone", "where", "everywhere", "anywhere", "somewhere", "nowhere", "inside",
    "outside", "around", "across", "along", "during", "before", "after", "since", "until", "while",
    "when", "whenever", "wherever", "how", "however", "why", "because", "so", "therefore", "thus",
    "hence", "though", "although", "unless", "if", "whether", "than", "then", "as", "like", "unlike",
    "besides", "except", "without", "within", "between", "among", "against", "toward", "towards",
    "near", "far", "close", "behind", "beyond", "beside", "beneath", "regarding", "overall",
    "finally", "additionally", "also", "just", "only", "even", "well", "best", "better", "top",
    "leading", "popular", "key", "main", "major", "ideal", "great", "excellent", "powerful",
    "robust", "affordable", "comprehensive", "advanced", "basic", "premium", "yes", "ok", "okay",

    # numbers
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "hundred", "thousand", "million", "billion",
})
