GLOBAL_COMPETITORS = [
    # CRM
    {"name": "HubSpot", "category": "crm", "aliases": ["hubspot", "hub spot", "hubspot crm", "marketing hub", "sales hub", "service hub"]},
    {"name": "Salesforce", "category": "crm", "aliases": ["salesforce", "sales force", "sfdc", "salesforce crm"]},
    {"name": "Zoho CRM", "category": "crm", "aliases": ["zoho", "zoho crm", "zoho one"]},
    {"name": "Pipedrive", "category": "crm", "aliases": ["pipedrive", "pipe drive"]},
    {"name": "Freshworks", "category": "crm", "aliases": ["freshworks", "freshsales", "freshdesk"]},
    {"name": "Copper", "category": "crm", "aliases": ["copper crm"]},
    {"name": "Microsoft Dynamics 365", "category": "crm", "aliases": ["microsoft dynamics", "dynamics 365", "ms dynamics"]},

    # project and productivity
    {"name": "Monday.com", "category": "project", "aliases": ["monday.com", "mondaycom"]},
    {"name": "Asana", "category": "project", "aliases": ["asana"]},
    {"name": "Trello", "category": "project", "aliases": ["trello"]},
    {"name": "ClickUp", "category": "project", "aliases": ["clickup", "click up"]},
    {"name": "Notion", "category": "productivity", "aliases": ["notion"]},
    {"name": "Airtable", "category": "productivity", "aliases": ["airtable"]},
    {"name": "Basecamp", "category": "project", "aliases": ["basecamp"]},

    # email marketing
    {"name": "Mailchimp", "category": "email", "aliases": ["mailchimp", "mail chimp"]},
    {"name": "Constant Contact", "category": "email", "aliases": ["constant contact", "constantcontact"]},
    {"name": "ActiveCampaign", "category": "email", "aliases": ["activecampaign", "active campaign"]},
    {"name": "ConvertKit", "category": "email", "aliases": ["convertkit", "convert kit", "kit.com"]},
    {"name": "Klaviyo", "category": "email", "aliases": ["klaviyo"]},
    {"name": "GetResponse", "category": "email", "aliases": ["getresponse", "get response"]},
    {"name": "AWeber", "category": "email", "aliases": ["aweber"]},
    {"name": "Campaign Monitor", "category": "email", "aliases": ["campaign monitor", "campaignmonitor"]},
    {"name": "Brevo", "category": "email", "aliases": ["brevo", "sendinblue"]},

    # marketing automation
    {"name": "Marketo", "category": "automation", "aliases": ["marketo", "adobe marketo"]},
    {"name": "Pardot", "category": "automation", "aliases": ["pardot", "salesforce pardot", "account engagement"]},
    {"name": "Eloqua", "category": "automation", "aliases": ["eloqua", "oracle eloqua"]},
    {"name": "SharpSpring", "category": "automation", "aliases": ["sharpspring", "sharp spring"]},
    {"name": "Keap", "category": "automation", "aliases": ["keap", "infusionsoft"]},

    # seo and analytics
    {"name": "SEMrush", "category": "seo", "aliases": ["semrush", "sem rush"]},
    {"name": "Ahrefs", "category": "seo", "aliases": ["ahrefs"]},
    {"name": "Moz", "category": "seo", "aliases": ["moz", "moz pro"]},
    {"name": "Google Analytics", "category": "analytics", "aliases": ["google analytics", "ga4", "universal analytics"]},
    {"name": "Adobe Analytics", "category": "analytics", "aliases": ["adobe analytics", "omniture"]},
    {"name": "Mixpanel", "category": "analytics", "aliases": ["mixpanel"]},
    {"name": "Amplitude", "category": "analytics", "aliases": ["amplitude"]},
    {"name": "Hotjar", "category": "analytics", "aliases": ["hotjar", "hot jar"]},
    {"name": "Crazy Egg", "category": "analytics", "aliases": ["crazy egg", "crazyegg"]},

    # social
    {"name": "Buffer", "category": "social", "aliases": ["buffer"]},
    {"name": "Hootsuite", "category": "social", "aliases": ["hootsuite", "hoot suite"]},
    {"name": "Sprout Social", "category": "social", "aliases": ["sprout social", "sproutsocial"]},
    {"name": "SocialBee", "category": "social", "aliases": ["socialbee", "social bee"]},
    {"name": "CoSchedule", "category": "social", "aliases": ["coschedule", "co schedule"]},

    # content and design
    {"name": "BuzzSumo", "category": "content", "aliases": ["buzzsumo", "buzz sumo"]},
    {"name": "Canva", "category": "design", "aliases": ["canva"]},
    {"name": "Figma", "category": "design", "aliases": ["figma"]},

    # integration
    {"name": "Zapier", "category": "automation", "aliases": ["zapier"]},
    {"name": "IFTTT", "category": "automation", "aliases": ["ifttt", "if this then that"]},
    {"name": "Optimizely", "category": "optimization", "aliases": ["optimizely"]},
    {"name": "VWO", "category": "optimization", "aliases": ["vwo", "visual website optimizer"]},

    # communication and support
    {"name": "Slack", "category": "communication", "aliases": ["slack"]},
    {"name": "Microsoft Teams", "category": "communication", "aliases": ["microsoft teams", "ms teams"]},
    {"name": "Zoom", "category": "communication", "aliases": ["zoom"]},
    {"name": "Intercom", "category": "support", "aliases": ["intercom"]},
    {"name": "Zendesk", "category": "support", "aliases": ["zendesk", "zen desk"]},
    {"name": "LiveChat", "category": "support", "aliases": ["livechat", "live chat"]},
    {"name": "Drift", "category": "support", "aliases": ["drift"]},

    # E-commerce
    {"name": "Shopify", "category": "ecommerce", "aliases": ["shopify", "shopify plus"]},
    {"name": "WooCommerce", "category": "ecommerce", "aliases": ["woocommerce", "woo commerce"]},
    {"name": "BigCommerce", "category": "ecommerce", "aliases": ["bigcommerce", "big commerce"]},
]
