"""Bundled sample dataset, used when the analytics export cannot be loaded."""

FALLBACK_DATASET = {
    "meta": {"source": "OpenFlights", "note": "Static route network, direction-specific unique routes"},
    "metrics": {
        "active_routes": 36708,
        "covered_airports": 3193,
        "active_airlines": 564,
        "countries_served": 225,
        "domestic_routes_percent": 47.12,
        "avg_dest_per_airport": 11.55,
        "top_hub": {"iata": "FRA", "connections": 239},
        "longest_route": {"from": "SYD", "to": "DFW", "distance_km": 13808.2},
    },
    "domestic_vs_international": [
        {"name": "International", "value": 19412},
        {"name": "Domestic", "value": 17296},
    ],
    "haul_distribution": [
        {"label": "Short-haul", "count": 39876},
        {"label": "Medium-haul", "count": 18530},
        {"label": "Long-haul", "count": 8029},
    ],
    "top_airlines": [
        {"airline": "FR", "routes": 2484},
        {"airline": "AA", "routes": 2352},
        {"airline": "UA", "routes": 2178},
        {"airline": "DL", "routes": 1981},
        {"airline": "US", "routes": 1960},
        {"airline": "W6", "routes": 1696},
        {"airline": "U2", "routes": 1616},
        {"airline": "WN", "routes": 1568},
        {"airline": "IB", "routes": 1500},
        {"airline": "KE", "routes": 1464},
    ],
    "routes_sample": [
        {"src_iata": "SYD", "dst_iata": "DFW", "distance_km": 13808.2, "airline": "QF"},
        {"src_iata": "JFK", "dst_iata": "SIN", "distance_km": 15344.4, "airline": "SQ"},
        {"src_iata": "AKL", "dst_iata": "DXB", "distance_km": 14200.3, "airline": "EK"},
        {"src_iata": "LAX", "dst_iata": "SIN", "distance_km": 14113.9, "airline": "SQ"},
        {"src_iata": "ATL", "dst_iata": "JNB", "distance_km": 13581.8, "airline": "DL"},
        {"src_iata": "CDG", "dst_iata": "SCL", "distance_km": 11680.1, "airline": "AF"},
        {"src_iata": "LHR", "dst_iata": "PER", "distance_km": 14469.7, "airline": "QF"},
        {"src_iata": "DOH", "dst_iata": "AKL", "distance_km": 14535.5, "airline": "QR"},
    ],
    "iata_lookup": {
        "SYD": {"name": "Sydney Kingsford Smith", "city": "Sydney", "country": "Australia",
                "continent": "Oceania", "lat": -33.946111, "lon": 151.177222},
        "DFW": {"name": "Dallas/Fort Worth International Airport", "city": "Dallas", "country": "United States",
                "continent": "North America", "lat": 32.896828, "lon": -97.037997},
        "JFK": {"name": "John F. Kennedy International Airport", "city": "New York", "country": "United States",
                "continent": "North America", "lat": 40.639751, "lon": -73.778925},
        "SIN": {"name": "Singapore Changi Airport", "city": "Singapore", "country": "Singapore",
                "continent": "Asia", "lat": 1.350189, "lon": 103.994433},
        "AKL": {"name": "Auckland International Airport", "city": "Auckland", "country": "New Zealand",
                "continent": "Oceania", "lat": -37.008056, "lon": 174.791667},
        "DXB": {"name": "Dubai International Airport", "city": "Dubai", "country": "United Arab Emirates",
                "continent": "Asia", "lat": 25.252778, "lon": 55.364444},
        "LAX": {"name": "Los Angeles International Airport", "city": "Los Angeles", "country": "United States",
                "continent": "North America", "lat": 33.9425, "lon": -118.407222},
        "ATL": {"name": "Hartsfield Jackson Atlanta International Airport", "city": "Atlanta",
                "country": "United States", "continent": "North America", "lat": 33.636719, "lon": -84.428067},
        "JNB": {"name": "OR Tambo International Airport", "city": "Johannesburg", "country": "South Africa",
                "continent": "Africa", "lat": -26.139167, "lon": 28.246111},
        "CDG": {"name": "Charles de Gaulle Airport", "city": "Paris", "country": "France",
                "continent": "Europe", "lat": 49.012779, "lon": 2.55},
        "SCL": {"name": "Arturo Merino Benitez International Airport", "city": "Santiago", "country": "Chile",
                "continent": "South America", "lat": -33.393056, "lon": -70.785833},
        "LHR": {"name": "London Heathrow Airport", "city": "London", "country": "United Kingdom",
                "continent": "Europe", "lat": 51.4775, "lon": -0.461389},
        "PER": {"name": "Perth International Airport", "city": "Perth", "country": "Australia",
                "continent": "Oceania", "lat": -31.940278, "lon": 115.966944},
        "DOH": {"name": "Hamad International Airport", "city": "Doha", "country": "Qatar",
                "continent": "Asia", "lat": 25.273056, "lon": 51.608056},
    },
}
