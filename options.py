"""
options.py — Dropdown vocabularies for the Sheet-1 and Sheet-2 forms.

Plain lists, injected into every template as ``options``. Fields backed by
these lists still accept free text ("Other"), so nothing here is enforced.
"""

DISTRICTS_TG = [
    "Adilabad", "Bhadradri Kothagudem", "Hanamkonda", "Hyderabad", "Jagtial",
    "Jangaon", "Jayashankar Bhupalpally", "Jogulamba Gadwal", "Kamareddy",
    "Karimnagar", "Khammam", "Komaram Bheem Asifabad", "Mahabubabad",
    "Mahabubnagar", "Mancherial", "Medak", "Medchal–Malkajgiri", "Mulugu",
    "Nagarkurnool", "Nalgonda", "Narayanpet", "Nirmal", "Nizamabad",
    "Peddapalli", "Rajanna Sircilla", "Rangareddy", "Sangareddy", "Siddipet",
    "Suryapet", "Vikarabad", "Wanaparthy", "Warangal", "Yadadri Bhuvanagiri", "Other",
]

PHYSIOGRAPHY = [
    "Upland", "Valley", "Piedmont", "Pediment", "Floodplain", "Interfluve",
    "Alluvial plain", "Coastal plain", "Hill slope", "Mesa/Plateau", "Other",
]

SLOPE_ASPECT = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

PARENT_MATERIAL = [
    "Alluvium", "Basalt", "Granite/Gneiss", "Shale", "Limestone", "Laterite",
    "Colluvium", "Aeolian sand", "Mixed", "Other",
]

LAND_USE = [
    "Crop", "Fallow", "Orchard", "Forest", "Grazing", "Built-up",
    "Industrial", "Roadside", "Water/WT", "Other",
]

NATURAL_VEGETATION = [
    "Scrub", "Grass", "Thorn", "Deciduous", "Plantation", "Prosopis", "Barren", "Other",
]

SALINITY = ["None", "Slight", "Moderate", "Strong"]

EROSION_TYPE = ["None", "Sheet", "Rill", "Gully", "Stream bank", "Wind"]
EROSION_SEVERITY = ["Slight", "Moderate", "Severe"]

ROCKY_STONY = ["None", "Stony", "Very stony", "Extremely stony", "Rock outcrops"]

BASE_MAP = ["SOI 1:50k", "SOI 1:25k", "Google Sat", "ESRI Sat", "Bhuvan", "DGPS", "Other"]

SITE_LOCATION = [
    "Summit", "Shoulder", "Backslope", "Footslope", "Toeslope",
    "Valley floor", "Terrace", "Other",
]

SOIL_SERIES = ["Alfisol", "Entisol", "Inceptisol", "Mollisol", "Vertisol", "Other"]

MAPPING_UNITS = ["Phase 1", "Phase 2", "Phase 3", "Complex", "Association", "Other"]

# Morphology

TEXTURES = ["S", "LS", "SL", "SiL", "L", "SCL", "SiCL", "CL", "SC", "SiC", "C"]

MOTTLES = [
    "None", "Few faint", "Few distinct", "Few prominent",
    "Common faint", "Common distinct", "Common prominent",
    "Many faint", "Many distinct", "Many prominent",
]

REACTION = [
    "Strongly acid", "Moderately acid", "Slightly acid", "Neutral",
    "Slightly alkaline", "Moderately alkaline", "Strongly alkaline",
    "Effervescence present",
]

CONCRETIONS = [
    "None", "Fe/Mn few", "Fe/Mn common", "Fe/Mn many",
    "Ca nodules few", "Ca nodules common", "Ca nodules many",
]

BOUNDARY_DISTINCT = ["Abrupt", "Clear", "Gradual", "Diffuse"]
BOUNDARY_TOPO = ["Smooth", "Wavy", "Irregular", "Broken"]

STRUCTURE_GRADE = ["Weak", "Moderate", "Strong"]
STRUCTURE_SIZE = ["Very fine", "Fine", "Medium", "Coarse", "Very coarse"]
STRUCTURE_TYPE = [
    "Granular", "Subangular blocky", "Angular blocky", "Prismatic", "Platy", "Massive",
]

CONS_DRY = ["Loose", "Soft", "Slightly hard", "Hard", "Very hard", "Extremely hard"]
CONS_MOIST = ["Very friable", "Friable", "Firm", "Very firm", "Extremely firm"]
CONS_STICKY = ["Non-sticky", "Slightly sticky", "Sticky", "Very sticky"]

FRAGMENT_PCT = ["0–5%", "5–15%", "15–35%", "35–60%", ">60%"]

PORE_FREQ = ["Very few", "Few", "Common", "Many"]

ROOT_ABUND = ["None", "Very few", "Few", "Common", "Many"]

CRACKS = [
    "None", "Few hairline", "Few wide", "Common wide",
    "Many wide", "Through-cracks present",
]

ARTEFACTS = ["None", "Brick fragments", "Charcoal/slag", "Plastic", "Other"]

LIME = [
    "None visible", "Slight effervescence", "Moderate effervescence",
    "Strong effervescence", "Soft powdery lime", "Hard nodules",
]

CUTANS = [
    "None", "Clay films few", "Clay films common", "Clay films many",
    "Iron coatings", "Manganese coatings", "Pressure faces/slickensides present",
]

MUNSELL_PRESETS = [
    "10YR 3/2", "10YR 4/3", "7.5YR 4/4", "2.5Y 5/2",
    "5YR 3/4", "2.5YR 3/6", "5Y 5/2",
]


# Form layout: (field name, label, vocabulary or None for free text).
# Numeric fields are listed separately by the templates.

HEADER_FIELDS = [
    ('nw_sub_watershed', 'NW Sub-watershed', None),
    ('village', 'Village', None),
    ('tehsil', 'Tehsil / Mandal', None),
    ('district', 'District', DISTRICTS_TG),
    ('state', 'State', None),
    ('series', 'Series', SOIL_SERIES),
    ('mapping_unit', 'Mapping Unit', MAPPING_UNITS),
    ('auger_bore_no', 'Auger Bore No.', None),
    ('base_map', 'Base Map', BASE_MAP),
    ('physiography', 'Physiography', PHYSIOGRAPHY),
    ('site_location', 'Site Location', SITE_LOCATION),
    ('parent_material', 'Parent Material', PARENT_MATERIAL),
    ('aspect', 'Aspect', SLOPE_ASPECT),
    ('natural_vegetation', 'Natural Vegetation', NATURAL_VEGETATION),
    ('land_use', 'Land Use', LAND_USE),
    ('saline_alkali', 'Saline / Alkali', SALINITY),
    ('erosion_type', 'Erosion Type', EROSION_TYPE),
    ('erosion_severity', 'Erosion Severity', EROSION_SEVERITY),
    ('rocky_stony_phases', 'Rocky / Stony Phases', ROCKY_STONY),
]

OBSERVATION_FIELDS = [
    ('colour', 'Colour (rubbed)', MUNSELL_PRESETS),
    ('texture', 'Texture', TEXTURES),
    ('mottles', 'Mottles', MOTTLES),
    ('reaction', 'Reaction', REACTION),
    ('concretions', 'Concretions', CONCRETIONS),
    ('rock_fragments', 'Rock Fragments', FRAGMENT_PCT),
]

HORIZON_FIELDS = [
    ('boundary_distinct', 'Boundary Distinctness', BOUNDARY_DISTINCT),
    ('boundary_topo', 'Boundary Topography', BOUNDARY_TOPO),
    ('colour', 'Colour (moist)', MUNSELL_PRESETS),
    ('mottles', 'Mottles / Speckles', MOTTLES),
    ('texture', 'Texture', TEXTURES),
    ('structure_grade', 'Structure Grade', STRUCTURE_GRADE),
    ('structure_size', 'Structure Size', STRUCTURE_SIZE),
    ('structure_type', 'Structure Type', STRUCTURE_TYPE),
    ('consistence_dry', 'Consistence Dry', CONS_DRY),
    ('consistence_moist', 'Consistence Moist', CONS_MOIST),
    ('consistence_wet', 'Consistence Wet', CONS_STICKY),
    ('coarse_fragments', 'Coarse Fragments', FRAGMENT_PCT),
    ('concretions', 'Concretions (Fe/Mn/Ca)', CONCRETIONS),
    ('pores', 'Pores', PORE_FREQ),
    ('cutans', 'Cutans (coatings)', CUTANS),
    ('roots', 'Roots', ROOT_ABUND),
    ('cracks', 'Cracks', CRACKS),
    ('artefacts', 'Artefacts', ARTEFACTS),
    ('lime', 'Lime', LIME),
    ('sample_no', 'Sample No.', None),
]
