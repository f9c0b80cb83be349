"""Static airport list backing the autocomplete endpoint."""

# (IATA, airport name, city, country)
AIRPORTS: list[tuple[str, str, str, str]] = [
    # United Kingdom & Ireland
    ("LHR", "Heathrow Airport", "London", "United Kingdom"),
    ("LGW", "Gatwick Airport", "London", "United Kingdom"),
    ("STN", "Stansted Airport", "London", "United Kingdom"),
    ("LTN", "Luton Airport", "London", "United Kingdom"),
    ("LCY", "London City Airport", "London", "United Kingdom"),
    ("MAN", "Manchester Airport", "Manchester", "United Kingdom"),
    ("BHX", "Birmingham Airport", "Birmingham", "United Kingdom"),
    ("BRS", "Bristol Airport", "Bristol", "United Kingdom"),
    ("EDI", "Edinburgh Airport", "Edinburgh", "United Kingdom"),
    ("GLA", "Glasgow Airport", "Glasgow", "United Kingdom"),
    ("BFS", "Belfast International Airport", "Belfast", "United Kingdom"),
    ("NCL", "Newcastle International Airport", "Newcastle", "United Kingdom"),
    ("DUB", "Dublin Airport", "Dublin", "Ireland"),
    # Western Europe
    ("CDG", "Charles de Gaulle Airport", "Paris", "France"),
    ("ORY", "Orly Airport", "Paris", "France"),
    ("NCE", "Nice Cote d'Azur Airport", "Nice", "France"),
    ("AMS", "Amsterdam Airport Schiphol", "Amsterdam", "Netherlands"),
    ("BRU", "Brussels Airport", "Brussels", "Belgium"),
    ("FRA", "Frankfurt Airport", "Frankfurt", "Germany"),
    ("MUC", "Munich Airport", "Munich", "Germany"),
    ("BER", "Berlin Brandenburg Airport", "Berlin", "Germany"),
    ("HAM", "Hamburg Airport", "Hamburg", "Germany"),
    ("ZRH", "Zurich Airport", "Zurich", "Switzerland"),
    ("GVA", "Geneva Airport", "Geneva", "Switzerland"),
    ("VIE", "Vienna International Airport", "Vienna", "Austria"),
    # Southern Europe
    ("MAD", "Adolfo Suarez Madrid-Barajas Airport", "Madrid", "Spain"),
    ("BCN", "Josep Tarradellas Barcelona-El Prat Airport", "Barcelona", "Spain"),
    ("AGP", "Malaga Airport", "Malaga", "Spain"),
    ("PMI", "Palma de Mallorca Airport", "Palma", "Spain"),
    ("LIS", "Humberto Delgado Airport", "Lisbon", "Portugal"),
    ("OPO", "Francisco Sa Carneiro Airport", "Porto", "Portugal"),
    ("FCO", "Leonardo da Vinci-Fiumicino Airport", "Rome", "Italy"),
    ("MXP", "Milan Malpensa Airport", "Milan", "Italy"),
    ("VCE", "Venice Marco Polo Airport", "Venice", "Italy"),
    ("NAP", "Naples International Airport", "Naples", "Italy"),
    ("ATH", "Athens International Airport", "Athens", "Greece"),
    ("IST", "Istanbul Airport", "Istanbul", "Turkey"),
    # Northern & Eastern Europe
    ("CPH", "Copenhagen Airport", "Copenhagen", "Denmark"),
    ("ARN", "Stockholm Arlanda Airport", "Stockholm", "Sweden"),
    ("OSL", "Oslo Airport", "Oslo", "Norway"),
    ("HEL", "Helsinki Airport", "Helsinki", "Finland"),
    ("KEF", "Keflavik International Airport", "Reykjavik", "Iceland"),
    ("WAW", "Warsaw Chopin Airport", "Warsaw", "Poland"),
    ("KRK", "Krakow John Paul II International Airport", "Krakow", "Poland"),
    ("PRG", "Vaclav Havel Airport Prague", "Prague", "Czech Republic"),
    ("BUD", "Budapest Ferenc Liszt International Airport", "Budapest", "Hungary"),
    # North America
    ("JFK", "John F. Kennedy International Airport", "New York", "United States"),
    ("EWR", "Newark Liberty International Airport", "Newark", "United States"),
    ("LAX", "Los Angeles International Airport", "Los Angeles", "United States"),
    ("SFO", "San Francisco International Airport", "San Francisco", "United States"),
    ("ORD", "O'Hare International Airport", "Chicago", "United States"),
    ("BOS", "Logan International Airport", "Boston", "United States"),
    ("MIA", "Miami International Airport", "Miami", "United States"),
    ("YYZ", "Toronto Pearson International Airport", "Toronto", "Canada"),
    ("YVR", "Vancouver International Airport", "Vancouver", "Canada"),
    # Middle East, Asia & Pacific
    ("DXB", "Dubai International Airport", "Dubai", "United Arab Emirates"),
    ("DOH", "Hamad International Airport", "Doha", "Qatar"),
    ("SIN", "Singapore Changi Airport", "Singapore", "Singapore"),
    ("HKG", "Hong Kong International Airport", "Hong Kong", "Hong Kong"),
    ("NRT", "Narita International Airport", "Tokyo", "Japan"),
    ("HND", "Haneda Airport", "Tokyo", "Japan"),
    ("BKK", "Suvarnabhumi Airport", "Bangkok", "Thailand"),
    ("DEL", "Indira Gandhi International Airport", "Delhi", "India"),
    ("SYD", "Sydney Kingsford Smith Airport", "Sydney", "Australia"),
]
