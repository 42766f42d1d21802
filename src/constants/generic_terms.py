BUSINESS_GENERIC_TERMS = frozenset({
    # technology
    "solution", "solutions", "platform", "platforms", "software", "application", "applications",
    "system", "systems", "tool", "tools", "service", "services", "product", "products", "technology",
    "technologies", "digital", "online", "cloud", "web", "mobile", "app", "apps", "website", "websites",
    "internet", "network", "networks", "data", "database", "databases", "server", "servers", "client",
    "clients", "user", "users", "customer", "customers", "api", "apis", "interface", "interfaces",
    "framework", "frameworks", "library", "libraries", "saas", "ai",

    # business
    "business", "businesses", "company", "companies", "organization", "organizations", "enterprise",
    "enterprises", "management", "marketing", "sales", "support", "development", "design", "analytics",
    "analysis", "report", "reports", "dashboard", "dashboards", "integration", "integrations",
    "automation", "workflow", "workflows", "process", "processes", "feature", "features", "function",
    "functions", "module", "modules", "component", "components", "experience", "performance",
    "optimization", "security", "privacy", "compliance", "collaboration", "communication",
    "productivity", "efficiency", "scalability", "reliability", "availability", "flexibility",
    "usability", "accessibility", "compatibility", "functionality", "capability", "capacity",
    "quality", "innovation", "transformation", "intelligence", "insights", "engagement",
    "conversion", "roi", "kpi", "metrics", "tracking", "monitoring", "reporting", "visualization",
    "personalization", "customization", "pricing", "plans", "integrations",

    # marketing
    "campaign", "campaigns", "audience", "audiences", "segment", "segments", "content", "email",
    "emails", "newsletter", "newsletters", "blog", "blogs", "media", "post", "posts", "video",
    "videos", "image", "images", "graphic", "graphics", "designs", "brand", "brands", "branding",
    "identity", "logo", "landing", "page", "pages", "form", "forms", "survey", "surveys", "leads",
    "prospect", "prospects", "contact", "contacts", "list", "lists", "tag", "tags", "category",
    "keyword", "keywords", "seo", "sem", "ppc", "cpc", "cpm", "ctr", "traffic", "organic", "paid",
    "funnel", "funnels", "attribution", "journey",

    # sales and support
    "opportunity", "opportunities", "deal", "deals", "pipeline", "forecast", "quota", "revenue",
    "buyer", "buyers", "vendor", "vendors", "partner", "partners", "channel", "channels", "retail",
    "commission", "profit", "cost", "costs", "discount", "promotion", "contract", "agreement",
    "terms", "help", "assistance", "ticket", "tickets", "chat", "feedback", "reviews", "rating",
    "ratings", "documentation", "guide", "guides", "tutorial", "tutorials", "onboarding", "setup",
    "configuration", "implementation", "deployment",

    # accounts and files
    "file", "files", "document", "documents", "folder", "upload", "download", "import", "export",
    "backup", "sync", "sharing", "permission", "permissions", "access", "login", "signin", "signup",
    "account", "accounts", "profile", "settings", "admin", "member", "members", "team", "teams",
    "group", "groups", "roles",
})

GENERIC_CATEGORY_PHRASES = frozenset({
    "business intelligence", "business analytics", "business automation", "business management",
    "business software", "business platform", "business solution", "enterprise software",
    "enterprise platform", "cloud platform", "cloud software", "saas platform", "saas software",
    "marketing automation", "email automation", "marketing platform", "email platform",
    "automation platform", "marketing software", "email software", "marketing tools", "email tools",
    "customer relationship management", "crm platform", "crm software", "crm solution", "crm system",
    "crm tools", "sales platform", "sales software", "sales tools", "lead management",
    "contact management", "pipeline management", "sales automation", "lead generation",
    "lead nurturing", "analytics platform", "analytics software", "analytics tools", "data analytics",
    "web analytics", "marketing analytics", "customer analytics", "reporting tools",
    "customer data", "customer experience", "customer journey", "customer support", "customer service",
    "customer success", "customer engagement", "content marketing", "content management",
    "content strategy", "content calendar", "social media", "social media marketing",
    "social listening", "search engine optimization", "seo tools", "digital marketing",
    "online marketing", "inbound marketing", "outbound marketing", "growth marketing",
    "email marketing", "affiliate marketing", "influencer marketing", "project management",
    "task management", "workflow management", "team collaboration", "productivity tools",
    "time tracking", "communication platform", "video conferencing", "workflow automation",
    "process automation", "data integration", "api integration", "small business",
    "small businesses", "key features", "best practices", "free plan", "free trial",
    "use case", "use cases", "ease of use", "final thoughts", "bottom line",
})

SPAM_PHRASES = (
    "click here", "learn more", "sign up", "get started", "find out", "read more", "see more",
    "view all", "show all", "learn how", "get help", "download now", "try now", "try it free",
    "contact us", "about us", "privacy policy", "terms of service", "book a demo", "request a demo",
)
