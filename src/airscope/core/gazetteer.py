"""Static gazetteer of Indian localities.

The table is built once at import time and never mutated. Its order is
significant: the location resolver breaks score ties by table position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LocationCategory(str, Enum):
    """Kind of place a gazetteer entry describes."""

    CITY = "city"
    LOCALITY = "locality"
    AREA = "area"
    DISTRICT = "district"
    SUBURB = "suburb"


@dataclass(frozen=True)
class GazetteerEntry:
    """A named place with its parent city, state and coordinates."""

    name: str
    parent_city: str
    state: str
    coordinates: tuple[float, float]
    category: LocationCategory
    aliases: frozenset[str] = field(default_factory=frozenset)

    @property
    def label(self) -> str:
        """Display label "name, parent city" (duplicates collapsed by the normalizer)."""
        return f"{self.name}, {self.parent_city}"


def _entry(
    name: str,
    city: str,
    state: str,
    coordinates: tuple[float, float],
    category: str,
    *aliases: str,
) -> GazetteerEntry:
    return GazetteerEntry(
        name=name,
        parent_city=city,
        state=state,
        coordinates=coordinates,
        category=LocationCategory(category),
        aliases=frozenset(aliases),
    )


GAZETTEER: tuple[GazetteerEntry, ...] = (
    # Delhi NCR
    _entry("Connaught Place", "Delhi", "Delhi", (28.6315, 77.2167), "area"),
    _entry("Karol Bagh", "Delhi", "Delhi", (28.6519, 77.1909), "area"),
    _entry("Lajpat Nagar", "Delhi", "Delhi", (28.5677, 77.2436), "area"),
    _entry("Saket", "Delhi", "Delhi", (28.5245, 77.2066), "area"),
    _entry("Vasant Kunj", "Delhi", "Delhi", (28.5200, 77.1591), "area"),
    _entry("Dwarka", "Delhi", "Delhi", (28.5921, 77.0460), "area"),
    _entry("Rohini", "Delhi", "Delhi", (28.7041, 77.1025), "area"),
    _entry("Janakpuri", "Delhi", "Delhi", (28.6219, 77.0814), "area"),
    _entry("Pitampura", "Delhi", "Delhi", (28.6942, 77.1314), "area"),
    _entry("Mayur Vihar", "Delhi", "Delhi", (28.6127, 77.2773), "area"),
    _entry("Preet Vihar", "Delhi", "Delhi", (28.6127, 77.2773), "area"),
    _entry("Laxmi Nagar", "Delhi", "Delhi", (28.6345, 77.2771), "area"),
    _entry("Rajouri Garden", "Delhi", "Delhi", (28.6469, 77.1200), "area"),
    _entry("Tilak Nagar", "Delhi", "Delhi", (28.6414, 77.0917), "area"),
    _entry("Punjabi Bagh", "Delhi", "Delhi", (28.6742, 77.1347), "area"),
    _entry("Paschim Vihar", "Delhi", "Delhi", (28.6692, 77.1056), "area"),
    _entry("Anand Vihar", "Delhi", "Delhi", (28.6469, 77.3152), "area"),
    _entry("Shahdara", "Delhi", "Delhi", (28.6692, 77.2889), "area"),
    _entry("Dilshad Garden", "Delhi", "Delhi", (28.6892, 77.3181), "area"),
    _entry("Vivek Vihar", "Delhi", "Delhi", (28.6725, 77.3181), "area"),

    # Gurgaon (Gurugram)
    _entry("Cyber City", "Gurgaon", "Haryana", (28.4947, 77.0869), "area"),
    _entry("Sector 14", "Gurgaon", "Haryana", (28.4595, 77.0266), "area"),
    _entry("Sector 29", "Gurgaon", "Haryana", (28.4601, 77.0648), "area"),
    _entry("MG Road", "Gurgaon", "Haryana", (28.4601, 77.0648), "area"),
    _entry("Golf Course Road", "Gurgaon", "Haryana", (28.4421, 77.0502), "area"),
    _entry("Sohna Road", "Gurgaon", "Haryana", (28.3670, 77.0820), "area"),

    # Noida
    _entry("Sector 18", "Noida", "Uttar Pradesh", (28.5678, 77.3261), "area"),
    _entry("Sector 62", "Noida", "Uttar Pradesh", (28.6139, 77.3648), "area"),
    _entry("Greater Noida", "Greater Noida", "Uttar Pradesh", (28.4744, 77.5040), "city"),

    # Mumbai
    _entry("Bandra", "Mumbai", "Maharashtra", (19.0596, 72.8295), "area"),
    _entry("Andheri", "Mumbai", "Maharashtra", (19.1136, 72.8697), "area"),
    _entry("Juhu", "Mumbai", "Maharashtra", (19.1075, 72.8263), "area"),
    _entry("Powai", "Mumbai", "Maharashtra", (19.1197, 72.9056), "area"),
    _entry("Worli", "Mumbai", "Maharashtra", (19.0176, 72.8118), "area"),
    _entry("Colaba", "Mumbai", "Maharashtra", (18.9067, 72.8147), "area"),
    _entry("Fort", "Mumbai", "Maharashtra", (18.9338, 72.8356), "area"),
    _entry("Dadar", "Mumbai", "Maharashtra", (19.0176, 72.8562), "area"),
    _entry("Kurla", "Mumbai", "Maharashtra", (19.0728, 72.8826), "area"),
    _entry("Malad", "Mumbai", "Maharashtra", (19.1864, 72.8493), "area"),
    _entry("Borivali", "Mumbai", "Maharashtra", (19.2307, 72.8567), "area"),
    _entry("Kandivali", "Mumbai", "Maharashtra", (19.2043, 72.8527), "area"),
    _entry("Goregaon", "Mumbai", "Maharashtra", (19.1663, 72.8526), "area"),
    _entry("Versova", "Mumbai", "Maharashtra", (19.1317, 72.8138), "area"),
    _entry("Lokhandwala", "Mumbai", "Maharashtra", (19.1368, 72.8261), "area"),
    _entry("Santacruz", "Mumbai", "Maharashtra", (19.0896, 72.8656), "area"),
    _entry("Vile Parle", "Mumbai", "Maharashtra", (19.0990, 72.8470), "area"),
    _entry("Khar", "Mumbai", "Maharashtra", (19.0728, 72.8370), "area"),
    _entry("Linking Road", "Mumbai", "Maharashtra", (19.0544, 72.8301), "area"),

    # Bangalore
    _entry("Koramangala", "Bangalore", "Karnataka", (12.9279, 77.6271), "area"),
    _entry("Indiranagar", "Bangalore", "Karnataka", (12.9719, 77.6412), "area"),
    _entry("Whitefield", "Bangalore", "Karnataka", (12.9698, 77.7500), "area"),
    _entry("Electronic City", "Bangalore", "Karnataka", (12.8456, 77.6603), "area"),
    _entry("BTM Layout", "Bangalore", "Karnataka", (12.9165, 77.6101), "area"),
    _entry("Jayanagar", "Bangalore", "Karnataka", (12.9237, 77.5937), "area"),
    _entry("JP Nagar", "Bangalore", "Karnataka", (12.9081, 77.5831), "area"),
    _entry("HSR Layout", "Bangalore", "Karnataka", (12.9116, 77.6473), "area"),
    _entry("Marathahalli", "Bangalore", "Karnataka", (12.9591, 77.6974), "area"),
    _entry("Sarjapur Road", "Bangalore", "Karnataka", (12.9010, 77.6874), "area"),
    _entry("Bannerghatta Road", "Bangalore", "Karnataka", (12.8456, 77.6603), "area"),
    _entry("Hebbal", "Bangalore", "Karnataka", (13.0358, 77.5970), "area"),
    _entry("Yeshwantpur", "Bangalore", "Karnataka", (13.0284, 77.5546), "area"),
    _entry("Rajajinagar", "Bangalore", "Karnataka", (12.9991, 77.5554), "area"),
    _entry("Malleshwaram", "Bangalore", "Karnataka", (13.0031, 77.5727), "area"),
    _entry("Basavanagudi", "Bangalore", "Karnataka", (12.9395, 77.5731), "area"),

    # Chennai
    _entry("T Nagar", "Chennai", "Tamil Nadu", (13.0418, 80.2341), "area"),
    _entry("Anna Nagar", "Chennai", "Tamil Nadu", (13.0850, 80.2101), "area"),
    _entry("Adyar", "Chennai", "Tamil Nadu", (13.0067, 80.2206), "area"),
    _entry("Velachery", "Chennai", "Tamil Nadu", (12.9750, 80.2200), "area"),
    _entry("OMR", "Chennai", "Tamil Nadu", (12.8406, 80.2270), "area", "Old Mahabalipuram Road"),
    _entry("Tambaram", "Chennai", "Tamil Nadu", (12.9249, 80.1000), "area"),
    _entry("Porur", "Chennai", "Tamil Nadu", (13.0381, 80.1564), "area"),
    _entry("Chrompet", "Chennai", "Tamil Nadu", (12.9516, 80.1462), "area"),

    # Hyderabad
    _entry("Banjara Hills", "Hyderabad", "Telangana", (17.4126, 78.4482), "area"),
    _entry("Jubilee Hills", "Hyderabad", "Telangana", (17.4239, 78.4738), "area"),
    _entry("HITEC City", "Hyderabad", "Telangana", (17.4435, 78.3772), "area"),
    _entry("Gachibowli", "Hyderabad", "Telangana", (17.4399, 78.3487), "area"),
    _entry("Kondapur", "Hyderabad", "Telangana", (17.4616, 78.3622), "area"),
    _entry("Madhapur", "Hyderabad", "Telangana", (17.4483, 78.3915), "area"),
    _entry("Secunderabad", "Hyderabad", "Telangana", (17.5040, 78.5030), "area"),
    _entry("Begumpet", "Hyderabad", "Telangana", (17.4399, 78.4482), "area"),

    # Pune
    _entry("Koregaon Park", "Pune", "Maharashtra", (18.5362, 73.8958), "area"),
    _entry("Baner", "Pune", "Maharashtra", (18.5679, 73.7797), "area"),
    _entry("Wakad", "Pune", "Maharashtra", (18.5975, 73.7898), "area"),
    _entry("Hinjewadi", "Pune", "Maharashtra", (18.5912, 73.7389), "area"),
    _entry("Kothrud", "Pune", "Maharashtra", (18.5074, 73.8077), "area"),
    _entry("Aundh", "Pune", "Maharashtra", (18.5593, 73.8078), "area"),
    _entry("Viman Nagar", "Pune", "Maharashtra", (18.5679, 73.9143), "area"),
    _entry("Hadapsar", "Pune", "Maharashtra", (18.5089, 73.9260), "area"),

    # Kolkata
    _entry("Salt Lake", "Kolkata", "West Bengal", (22.5958, 88.4497), "area"),
    _entry("Park Street", "Kolkata", "West Bengal", (22.5448, 88.3426), "area"),
    _entry("Ballygunge", "Kolkata", "West Bengal", (22.5354, 88.3643), "area"),
    _entry("Howrah", "Kolkata", "West Bengal", (22.5958, 88.2636), "area"),
    _entry("New Town", "Kolkata", "West Bengal", (22.5958, 88.4497), "area"),

    # Ahmedabad
    _entry("Satellite", "Ahmedabad", "Gujarat", (23.0267, 72.5090), "area"),
    _entry("Vastrapur", "Ahmedabad", "Gujarat", (23.0395, 72.5240), "area"),
    _entry("Bopal", "Ahmedabad", "Gujarat", (23.0395, 72.4240), "area"),
    _entry("Prahlad Nagar", "Ahmedabad", "Gujarat", (23.0267, 72.5090), "area"),

    # Jaipur
    _entry("Malviya Nagar", "Jaipur", "Rajasthan", (26.8854, 75.8144), "area"),
    _entry("Vaishali Nagar", "Jaipur", "Rajasthan", (26.9354, 75.7272), "area"),
    _entry("C Scheme", "Jaipur", "Rajasthan", (26.9124, 75.7873), "area"),
    _entry("Mansarovar", "Jaipur", "Rajasthan", (26.8854, 75.7647), "area"),

    # Cities
    _entry("Delhi", "Delhi", "Delhi", (28.6139, 77.2090), "city"),
    _entry("Mumbai", "Mumbai", "Maharashtra", (19.0760, 72.8777), "city"),
    _entry("Bangalore", "Bangalore", "Karnataka", (12.9716, 77.5946), "city", "Bengaluru"),
    _entry("Chennai", "Chennai", "Tamil Nadu", (13.0827, 80.2707), "city"),
    _entry("Kolkata", "Kolkata", "West Bengal", (22.5726, 88.3639), "city"),
    _entry("Hyderabad", "Hyderabad", "Telangana", (17.3850, 78.4867), "city"),
    _entry("Pune", "Pune", "Maharashtra", (18.5204, 73.8567), "city"),
    _entry("Ahmedabad", "Ahmedabad", "Gujarat", (23.0225, 72.5714), "city"),
    _entry("Jaipur", "Jaipur", "Rajasthan", (26.9124, 75.7873), "city"),
    _entry("Lucknow", "Lucknow", "Uttar Pradesh", (26.8467, 80.9462), "city"),
    _entry("Kanpur", "Kanpur", "Uttar Pradesh", (26.4499, 80.3319), "city"),
    _entry("Nagpur", "Nagpur", "Maharashtra", (21.1458, 79.0882), "city"),
    _entry("Indore", "Indore", "Madhya Pradesh", (22.7196, 75.8577), "city"),
    _entry("Thane", "Thane", "Maharashtra", (19.2183, 72.9781), "city"),
    _entry("Bhopal", "Bhopal", "Madhya Pradesh", (23.2599, 77.4126), "city"),
    _entry("Visakhapatnam", "Visakhapatnam", "Andhra Pradesh", (17.6868, 83.2185), "city"),
    _entry("Patna", "Patna", "Bihar", (25.5941, 85.1376), "city"),
    _entry("Vadodara", "Vadodara", "Gujarat", (22.3072, 73.1812), "city"),
    _entry("Ghaziabad", "Ghaziabad", "Uttar Pradesh", (28.6692, 77.4538), "city"),
    _entry("Ludhiana", "Ludhiana", "Punjab", (30.9010, 75.8573), "city"),
    _entry("Agra", "Agra", "Uttar Pradesh", (27.1767, 78.0081), "city"),
    _entry("Nashik", "Nashik", "Maharashtra", (19.9975, 73.7898), "city"),
    _entry("Faridabad", "Faridabad", "Haryana", (28.4089, 77.3178), "city"),
    _entry("Meerut", "Meerut", "Uttar Pradesh", (28.9845, 77.7064), "city"),
    _entry("Rajkot", "Rajkot", "Gujarat", (22.3039, 70.8022), "city"),
    _entry("Kalyan-Dombivli", "Kalyan", "Maharashtra", (19.2403, 73.1305), "city"),
    _entry("Vasai-Virar", "Vasai", "Maharashtra", (19.4912, 72.8054), "city"),
    _entry("Varanasi", "Varanasi", "Uttar Pradesh", (25.3176, 82.9739), "city"),
    _entry("Srinagar", "Srinagar", "Jammu and Kashmir", (34.0837, 74.7973), "city"),
    _entry("Aurangabad", "Aurangabad", "Maharashtra", (19.8762, 75.3433), "city"),
    _entry("Dhanbad", "Dhanbad", "Jharkhand", (23.7957, 86.4304), "city"),
    _entry("Amritsar", "Amritsar", "Punjab", (31.6340, 74.8723), "city"),
    _entry("Navi Mumbai", "Navi Mumbai", "Maharashtra", (19.0330, 73.0297), "city"),
    _entry("Allahabad", "Allahabad", "Uttar Pradesh", (25.4358, 81.8463), "city", "Prayagraj"),
    _entry("Ranchi", "Ranchi", "Jharkhand", (23.3441, 85.3096), "city"),
    _entry("Howrah", "Howrah", "West Bengal", (22.5958, 88.2636), "city"),
    _entry("Coimbatore", "Coimbatore", "Tamil Nadu", (11.0168, 76.9558), "city"),
    _entry("Jabalpur", "Jabalpur", "Madhya Pradesh", (23.1815, 79.9864), "city"),
    _entry("Gwalior", "Gwalior", "Madhya Pradesh", (26.2183, 78.1828), "city"),
    _entry("Vijayawada", "Vijayawada", "Andhra Pradesh", (16.5062, 80.6480), "city"),
    _entry("Jodhpur", "Jodhpur", "Rajasthan", (26.2389, 73.0243), "city"),
    _entry("Madurai", "Madurai", "Tamil Nadu", (9.9252, 78.1198), "city"),
    _entry("Raipur", "Raipur", "Chhattisgarh", (21.2514, 81.6296), "city"),
    _entry("Kota", "Kota", "Rajasthan", (25.2138, 75.8648), "city"),
    _entry("Guwahati", "Guwahati", "Assam", (26.1445, 91.7362), "city"),
    _entry("Chandigarh", "Chandigarh", "Chandigarh", (30.7333, 76.7794), "city"),
    _entry("Thiruvananthapuram", "Thiruvananthapuram", "Kerala", (8.5241, 76.9366), "city"),
    _entry("Solapur", "Solapur", "Maharashtra", (17.6599, 75.9064), "city"),
    _entry("Hubballi-Dharwad", "Hubballi", "Karnataka", (15.3647, 75.1240), "city"),
    _entry("Tiruchirappalli", "Tiruchirappalli", "Tamil Nadu", (10.7905, 78.7047), "city"),
    _entry("Bareilly", "Bareilly", "Uttar Pradesh", (28.3670, 79.4304), "city"),
    _entry("Mysore", "Mysore", "Karnataka", (12.2958, 76.6394), "city", "Mysuru"),
    _entry("Tiruppur", "Tiruppur", "Tamil Nadu", (11.1085, 77.3411), "city"),
    _entry("Gurgaon", "Gurgaon", "Haryana", (28.4595, 77.0266), "city", "Gurugram"),
    _entry("Aligarh", "Aligarh", "Uttar Pradesh", (27.8974, 78.0880), "city"),
    _entry("Jalandhar", "Jalandhar", "Punjab", (31.3260, 75.5762), "city"),
    _entry("Bhubaneswar", "Bhubaneswar", "Odisha", (20.2961, 85.8245), "city"),
    _entry("Salem", "Salem", "Tamil Nadu", (11.6643, 78.1460), "city"),
    _entry("Mira-Bhayandar", "Mira-Bhayandar", "Maharashtra", (19.2952, 72.8544), "city"),
    _entry("Warangal", "Warangal", "Telangana", (17.9689, 79.5941), "city"),
    _entry("Guntur", "Guntur", "Andhra Pradesh", (16.3067, 80.4365), "city"),
    _entry("Bhiwandi", "Bhiwandi", "Maharashtra", (19.3002, 73.0635), "city"),
    _entry("Saharanpur", "Saharanpur", "Uttar Pradesh", (29.9680, 77.5552), "city"),
    _entry("Gorakhpur", "Gorakhpur", "Uttar Pradesh", (26.7606, 83.3732), "city"),
    _entry("Bikaner", "Bikaner", "Rajasthan", (28.0229, 73.3119), "city"),
    _entry("Amravati", "Amravati", "Maharashtra", (20.9374, 77.7796), "city"),
    _entry("Noida", "Noida", "Uttar Pradesh", (28.5355, 77.3910), "city"),
    _entry("Jamshedpur", "Jamshedpur", "Jharkhand", (22.8046, 86.2029), "city"),
    _entry("Bhilai Nagar", "Bhilai", "Chhattisgarh", (21.1938, 81.3509), "city"),
    _entry("Cuttack", "Cuttack", "Odisha", (20.4625, 85.8828), "city"),
    _entry("Firozabad", "Firozabad", "Uttar Pradesh", (27.1592, 78.3957), "city"),
    _entry("Kochi", "Kochi", "Kerala", (9.9312, 76.2673), "city"),
    _entry("Nellore", "Nellore", "Andhra Pradesh", (14.4426, 79.9865), "city"),
    _entry("Bhavnagar", "Bhavnagar", "Gujarat", (21.7645, 72.1519), "city"),
    _entry("Dehradun", "Dehradun", "Uttarakhand", (30.3165, 78.0322), "city"),
    _entry("Durgapur", "Durgapur", "West Bengal", (23.5204, 87.3119), "city"),
    _entry("Asansol", "Asansol", "West Bengal", (23.6739, 86.9524), "city"),
    _entry("Rourkela", "Rourkela", "Odisha", (22.2604, 84.8536), "city"),
    _entry("Nanded", "Nanded", "Maharashtra", (19.1383, 77.2975), "city"),
    _entry("Kolhapur", "Kolhapur", "Maharashtra", (16.7050, 74.2433), "city"),
    _entry("Ajmer", "Ajmer", "Rajasthan", (26.4499, 74.6399), "city"),
    _entry("Akola", "Akola", "Maharashtra", (20.7002, 77.0082), "city"),
    _entry("Gulbarga", "Gulbarga", "Karnataka", (17.3297, 76.8343), "city"),
    _entry("Jamnagar", "Jamnagar", "Gujarat", (22.4707, 70.0577), "city"),
    _entry("Ujjain", "Ujjain", "Madhya Pradesh", (23.1765, 75.7885), "city"),
    _entry("Loni", "Loni", "Uttar Pradesh", (28.7333, 77.2833), "city"),
    _entry("Siliguri", "Siliguri", "West Bengal", (26.7271, 88.3953), "city"),
    _entry("Jhansi", "Jhansi", "Uttar Pradesh", (25.4484, 78.5685), "city"),
    _entry("Ulhasnagar", "Ulhasnagar", "Maharashtra", (19.2215, 73.1645), "city"),
    _entry("Jammu", "Jammu", "Jammu and Kashmir", (32.7266, 74.8570), "city"),
    _entry("Sangli-Miraj & Kupwad", "Sangli", "Maharashtra", (16.8524, 74.5815), "city"),
    _entry("Mangalore", "Mangalore", "Karnataka", (12.9141, 74.8560), "city"),
    _entry("Erode", "Erode", "Tamil Nadu", (11.3410, 77.7172), "city"),
    _entry("Belgaum", "Belgaum", "Karnataka", (15.8497, 74.4977), "city"),
    _entry("Ambattur", "Ambattur", "Tamil Nadu", (13.1143, 80.1548), "city"),
    _entry("Tirunelveli", "Tirunelveli", "Tamil Nadu", (8.7139, 77.7567), "city"),
    _entry("Malegaon", "Malegaon", "Maharashtra", (20.5579, 74.5287), "city"),
    _entry("Gaya", "Gaya", "Bihar", (24.7914, 85.0002), "city"),
    _entry("Jalgaon", "Jalgaon", "Maharashtra", (21.0077, 75.5626), "city"),
    _entry("Udaipur", "Udaipur", "Rajasthan", (24.5854, 73.7125), "city"),
    _entry("Maheshtala", "Maheshtala", "West Bengal", (22.5093, 88.2482), "city"),
)

POPULAR_CITY_NAMES: frozenset[str] = frozenset(
    {
        "Delhi",
        "Mumbai",
        "Bangalore",
        "Chennai",
        "Kolkata",
        "Hyderabad",
        "Pune",
        "Ahmedabad",
        "Jaipur",
        "Lucknow",
    }
)


class Gazetteer:
    """Read-only view over a table of entries.

    Args:
        entries: Table to expose; defaults to the built-in GAZETTEER.
        popular_names: Names of the city entries offered as popular choices.
    """

    def __init__(
        self,
        entries: tuple[GazetteerEntry, ...] | None = None,
        popular_names: frozenset[str] | None = None,
    ) -> None:
        self._entries = GAZETTEER if entries is None else tuple(entries)
        names = POPULAR_CITY_NAMES if popular_names is None else popular_names
        self._popular = tuple(
            entry
            for entry in self._entries
            if entry.category is LocationCategory.CITY and entry.name in names
        )

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[GazetteerEntry, ...]:
        return self._entries

    def popular_cities(self) -> tuple[GazetteerEntry, ...]:
        """Popular city entries in table order."""
        return self._popular
