"""Bundled service lists served when the catalog backend is unavailable (API payload shape)."""

from __future__ import annotations

from typing import Any

CONSTRUCTION_SERVICES: list[dict[str, Any]] = [
    {
        "_id": "1",
        "title": "Living Room Construction",
        "description": "Complete living room construction including furniture selection, color schemes, lighting design, and decor placement.",
        "category": "Residential",
        "image": "https://images.unsplash.com/photo-1618221195710-dd6b41faaea6?w=800",
        "pricing": {"type": "per_sqft", "basePrice": 450},
        "features": [
            "Space planning and layout design",
            "3D visualization and renders",
            "Furniture selection and procurement",
            "Color consultation",
            "Lighting design",
            "Decor and accessories",
        ],
        "duration": {"min": 3, "max": 6, "unit": "weeks"},
        "popular": True,
    },
    {
        "_id": "2",
        "title": "Bedroom Construction",
        "description": "Complete bedroom construction including wardrobe, bed design, lighting, and a comfortable ambiance.",
        "category": "Residential",
        "image": "https://images.unsplash.com/photo-1616594039964-ae9021a400a0?w=800",
        "pricing": {"type": "per_sqft", "basePrice": 400},
        "features": [
            "Master bedroom design",
            "Wardrobe and storage solutions",
            "Bed and furniture design",
            "Mood lighting setup",
            "Window treatments",
        ],
        "duration": {"min": 2, "max": 5, "unit": "weeks"},
        "popular": True,
    },
    {
        "_id": "3",
        "title": "Modular Kitchen Construction",
        "description": "Complete modular kitchen with premium materials, smart storage, appliance integration, and modern aesthetics.",
        "category": "Residential",
        "image": "https://images.unsplash.com/photo-1556911220-bff31c812dba?w=800",
        "pricing": {"type": "fixed", "basePrice": 250000},
        "features": [
            "Modular kitchen cabinets",
            "Countertop selection",
            "Appliances integration",
            "Chimney and hob setup",
            "Storage optimization",
        ],
        "duration": {"min": 4, "max": 8, "unit": "weeks"},
        "popular": True,
    },
    {
        "_id": "4",
        "title": "Office Construction",
        "description": "Modern office construction with ergonomic furniture, efficient layouts, and brand-aligned aesthetics.",
        "category": "Office",
        "image": "https://images.unsplash.com/photo-1497366216548-37526070297c?w=800",
        "pricing": {"type": "per_sqft", "basePrice": 350},
        "features": [
            "Workspace planning",
            "Ergonomic furniture",
            "Meeting room design",
            "Reception area design",
            "Cable management",
        ],
        "duration": {"min": 6, "max": 12, "unit": "weeks"},
    },
    {
        "_id": "5",
        "title": "Full Home Construction",
        "description": "End-to-end construction for the entire home including all rooms, coordination, and project management.",
        "category": "Full Home",
        "image": "https://images.unsplash.com/photo-1600210492486-724fe5c67fb0?w=800",
        "pricing": {"type": "custom", "minPrice": 500000, "maxPrice": 5000000},
        "features": [
            "Complete home design",
            "All rooms coordination",
            "Project management",
            "Quality materials",
            "Post-completion support",
        ],
        "duration": {"min": 8, "max": 16, "unit": "weeks"},
        "popular": True,
    },
    {
        "_id": "6",
        "title": "Restaurant Construction",
        "description": "Restaurant and cafe construction that enhances the dining experience with ambiance, seating, and branding.",
        "category": "Hospitality",
        "image": "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=800",
        "pricing": {"type": "per_sqft", "basePrice": 500},
        "features": [
            "Dining area layout",
            "Kitchen design",
            "Seating arrangements",
            "Lighting and ambiance",
            "Outdoor seating design",
        ],
        "duration": {"min": 8, "max": 14, "unit": "weeks"},
        "trending": True,
    },
]

RENOVATION_SERVICES: list[dict[str, Any]] = [
    {
        "_id": "ren-1",
        "title": "Kitchen Renovation",
        "description": "Refresh cabinets, countertops, plumbing points, and lighting without rebuilding from scratch.",
        "category": "Kitchen Renovation",
        "image": "https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?w=800",
        "pricing": {"type": "fixed", "basePrice": 180000},
        "features": ["Cabinet refacing", "Countertop replacement", "Backsplash tiling", "Electrical upgrades"],
        "duration": {"min": 2, "max": 4, "unit": "weeks"},
        "popular": True,
    },
    {
        "_id": "ren-2",
        "title": "Bathroom Renovation",
        "description": "Waterproofing, new fittings, and tiling for a modern, low-maintenance bathroom.",
        "category": "Bathroom Renovation",
        "image": "https://images.unsplash.com/photo-1552321554-5fefe8c9ef14?w=800",
        "pricing": {"type": "fixed", "basePrice": 120000},
        "features": ["Waterproofing", "Sanitaryware replacement", "Wall and floor tiling", "Vanity installation"],
        "duration": {"min": 1, "max": 3, "unit": "weeks"},
        "popular": True,
    },
    {
        "_id": "ren-3",
        "title": "Living Room Makeover",
        "description": "False ceiling, wall finishes, and lighting to modernise an existing living room.",
        "category": "Living Room Renovation",
        "image": "https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=800",
        "pricing": {"type": "per_sqft", "basePrice": 280},
        "features": ["False ceiling", "Accent walls", "Lighting redesign", "Flooring refresh"],
        "duration": {"min": 2, "max": 5, "unit": "weeks"},
    },
    {
        "_id": "ren-4",
        "title": "Full Home Renovation",
        "description": "Room-by-room renovation of an entire home with a single project manager.",
        "category": "Full Home Renovation",
        "image": "https://images.unsplash.com/photo-1600585154340-be6161a56a0c?w=800",
        "pricing": {"type": "custom", "minPrice": 800000, "maxPrice": 3500000},
        "features": ["Structural assessment", "Electrical and plumbing rework", "Interiors", "Project management"],
        "duration": {"min": 3, "max": 6, "unit": "months"},
        "trending": True,
    },
    {
        "_id": "ren-5",
        "title": "Exterior Facade Renovation",
        "description": "Weatherproof painting, cladding, and facade repairs for independent homes and buildings.",
        "category": "Exterior Renovation",
        "image": "https://images.unsplash.com/photo-1600047509807-ba8f99d2cdde?w=800",
        "pricing": {"type": "per_sqft", "basePrice": 150},
        "features": ["Crack repair", "Weatherproof coating", "Cladding", "Gutter repair"],
        "duration": {"min": 2, "max": 6, "unit": "weeks"},
    },
]

ON_DEMAND_SERVICES: list[dict[str, Any]] = [
    {
        "_id": "od-1",
        "title": "Plumbing Services",
        "description": "Expert plumbers available for repairs, installations, and maintenance.",
        "category": "Plumbing",
        "image": "https://images.unsplash.com/photo-1607472586893-edb57bdc0e39?w=800",
        "pricing": {"type": "hourly", "hourlyRate": 299, "minHours": 1},
        "features": [
            "Tap & pipe repairs",
            "Toilet & bathroom fitting",
            "Water heater installation",
            "Drainage cleaning",
            "Leak detection & fixing",
        ],
        "duration": {"estimated": 1, "unit": "hours"},
        "popular": True,
    },
    {
        "_id": "od-2",
        "title": "Electrical Services",
        "description": "Certified electricians for safe and reliable electrical work at home and office.",
        "category": "Electrical",
        "image": "https://images.unsplash.com/photo-1621905251918-48416bd8575a?w=800",
        "pricing": {"type": "hourly", "hourlyRate": 349, "minHours": 1},
        "features": [
            "Wiring & rewiring",
            "Switch & socket installation",
            "MCB & fuse replacement",
            "Fan & light installation",
        ],
        "duration": {"estimated": 1, "unit": "hours"},
        "popular": True,
    },
    {
        "_id": "od-3",
        "title": "Home Deep Cleaning",
        "description": "Thorough cleaning of your entire home with eco-friendly products.",
        "category": "Cleaning",
        "image": "https://images.unsplash.com/photo-1581578731548-c64695cc6952?w=800",
        "pricing": {"type": "fixed", "basePrice": 2499},
        "features": ["Kitchen deep clean", "Bathroom sanitization", "Floor mopping & polishing", "Balcony cleaning"],
        "duration": {"estimated": 3, "unit": "hours"},
        "popular": True,
    },
    {
        "_id": "od-4",
        "title": "AC Service & Repair",
        "description": "Keep your AC running efficiently with our expert technicians.",
        "category": "AC Service",
        "image": "https://images.unsplash.com/photo-1631545806609-c8d6c91143c7?w=800",
        "pricing": {"type": "fixed", "basePrice": 399},
        "features": ["AC gas refilling", "Deep cleaning & servicing", "Filter replacement", "Annual maintenance"],
        "duration": {"estimated": 1, "unit": "hours"},
    },
    {
        "_id": "od-5",
        "title": "Pest Control Service",
        "description": "Get rid of cockroaches, ants, mosquitoes, and other pests safely.",
        "category": "Pest Control",
        "image": "https://images.unsplash.com/photo-1563720223185-11003d516935?w=800",
        "pricing": {"type": "fixed", "basePrice": 899},
        "features": ["Cockroach control", "Mosquito control", "Termite treatment", "Rodent control"],
        "duration": {"estimated": 1, "unit": "hours"},
        "popular": True,
    },
    {
        "_id": "od-6",
        "title": "Washing Machine Repair",
        "description": "Quick and reliable repair for all washing machine brands at your doorstep.",
        "category": "Appliance Repair",
        "image": "https://images.unsplash.com/photo-1626806787461-102c1bfaaea1?w=800",
        "pricing": {"type": "hourly", "hourlyRate": 299, "minHours": 1},
        "features": ["Not starting issues", "Drainage problems", "Spin cycle repair", "Leak fixing"],
        "duration": {"estimated": 1, "unit": "hours"},
    },
    {
        "_id": "od-7",
        "title": "Salon at Home - Women",
        "description": "Professional beauticians for haircare, skincare, and makeup at home.",
        "category": "Salon & Beauty",
        "image": "https://images.unsplash.com/photo-1560066984-138dadb4c035?w=800",
        "pricing": {"type": "fixed", "basePrice": 599},
        "features": ["Hair cut & styling", "Facial & cleanup", "Waxing & threading", "Manicure & pedicure"],
        "duration": {"estimated": 2, "unit": "hours"},
        "popular": True,
        "rating": {"average": 4.7, "count": 1280},
    },
    {
        "_id": "od-8",
        "title": "Wall Painting Service",
        "description": "Quality paints and skilled painters for a perfect finish.",
        "category": "Painting",
        "image": "https://images.unsplash.com/photo-1589939705384-5185137a7f0f?w=800",
        "pricing": {"type": "per_unit", "unitPrice": 12, "unitName": "sq.ft"},
        "features": ["Interior painting", "Exterior painting", "Wall preparation", "Furniture protection"],
        "duration": {"estimated": 1, "unit": "days"},
    },
]
