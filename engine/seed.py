"""
Seed BMS Database

Pre-configured BMS entries linking BIM elements (by IFC GlobalId) to
the channel kinds their sensors report. In a deployed system this
table would be loaded from the BMS; here it is the demo building.
"""

from dataclasses import dataclass
from typing import List, Tuple

from core.profiles import ChannelKind

T = ChannelKind.TEMPERATURE
H = ChannelKind.HUMIDITY
OCC = ChannelKind.OCCUPANCY
CO2 = ChannelKind.CO2
E = ChannelKind.ENERGY
L = ChannelKind.LIGHTING
AF = ChannelKind.AIRFLOW
P = ChannelKind.PRESSURE


@dataclass(frozen=True)
class SeedEntry:
    """One pre-configured asset: id, display name, and channel kinds."""
    asset_id: str
    display_name: str
    kinds: Tuple[ChannelKind, ...]


SEED_DATABASE: List[SeedEntry] = [
    # Mechanical Equipment - Trench Heating
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xtu", "Kampmann_TrenchHeating_2pipe: HK320", (T, E)),

    # Mechanical Equipment - VRF System
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xt0", "BIMo_Clivet_VRF_Outdoor_MV6i_500T: MV6-i500WV2GN1", (T, E, P)),

    # Mechanical Equipment - Fan Coil Units (Ceiling)
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xt1", "Kapmann_FanCoil_Ceiling: 1250x495_TopConnection (FCU-01)", (T, AF, E)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xt2", "Kapmann_FanCoil_Ceiling: 1250x495_TopConnection (FCU-02)", (T, AF, E)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xt3", "Kapmann_FanCoil_Ceiling: 1250x495_TopConnection (FCU-03)", (T, AF, E)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XmN", "Kapmann_FanCoil_Ceiling: 1250x495_TopConnection (FCU-04)", (T, AF, E)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XmO", "Kapmann_FanCoil_Ceiling: 1250x495_TopConnection (FCU-05)", (T, AF, E)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xpb", "Kapmann_FanCoil_Ceiling: 1250x495_TopConnection (FCU-06)", (T, AF, E)),

    # Air Terminals - Exhaust Valves
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xp4", "Generic_PoppetValve_Round_Exhaust: NW 100 (EXH-01)", (AF,)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XCp", "Generic_PoppetValve_Round_Exhaust: NW 100 (EXH-02)", (AF,)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XCC", "Generic_PoppetValve_Round_Exhaust: NW 100 (EXH-03)", (AF,)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XCD", "Generic_PoppetValve_Round_Exhaust: NW 100 (EXH-04)", (AF,)),

    # Air Terminals - Supply Terminals
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xp5", "Klimaoprema_AirTerminal_OAH1: 425x325 (SUP-01)", (AF, T)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XDs", "Klimaoprema_AirTerminal_OAH1: 425x125 (SUP-02)", (AF, T)),

    # Mechanical Equipment - Axial Fans
    SeedEntry("2Z6LRLJyP8pPa$Guk37Xp6", "Aereco_AxialFan_EGPAML: EGP.AML.31.2.0.75 (FAN-01)", (AF, E)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XDv", "Infiniair_AxialFan_DuctMounted: Diameter_100 (FAN-02)", (AF, E)),

    # Plumbing Fixtures - Roof Drains
    SeedEntry("2Z6LRLJyP8pPa$Guk37XCX", "Geberit_PlumbingFixture_Pluvia: 125/50 (RD-01)", (P,)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XCZ", "Geberit_PlumbingFixture_Pluvia: 125/50 (RD-02)", (P,)),
    SeedEntry("2Z6LRLJyP8pPa$Guk37XCa", "Geberit_PlumbingFixture_Pluvia: 125/50 (RD-03)", (P,)),

    # Legacy/Demo entries
    SeedEntry("2Z6LRLJyP8pPa$Guk37XvH", "AHU-01", (T, H, AF, E, P)),
    SeedEntry("2LftbZkEr4axg6d3FRT_e2", "Room 101", (T, H, OCC, CO2, L)),
    SeedEntry("1hOSwPNfz2Bw_3Z7ePjS2T", "Chiller CH-01", (T, E, P)),
    SeedEntry("2nFhP8Tq94TgX6dNc7LqW1", "VAV Box VAV-01", (AF, T)),
    SeedEntry("4kLmN9Rw31SaYbZcJhVuP8", "Pump P-01", (P, E, T)),
]
