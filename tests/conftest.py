"""Shared fixtures: reference tuning tables of 128 frequencies."""

import pytest

from tonewheel_tuning.pitch import note_to_frequency
from tonewheel_tuning.tuning_source import FixedTableSource

MIDDLE_C = 261.62556530059874

# 12-TET at A4 = 440 Hz, as reported by an unconfigured MTS-ESP client
TET12 = [note_to_frequency(n) for n in range(128)]

# 19 equal divisions of the octave, middle C at note 60
TET19 = [note_to_frequency(n, divisions=19, anchor_note=60, anchor_frequency=MIDDLE_C)
         for n in range(128)]

# Bohlen-Pierce: 13 equal divisions of the tritave (3:1), middle C at note 60
BOHLEN_PIERCE = [note_to_frequency(n, divisions=13, period_ratio=3.0, anchor_note=60,
                                   anchor_frequency=MIDDLE_C)
                 for n in range(128)]

# p4.scl: 1/1 2/1 3/1 5/1 repeating at 7/1, middle C at note 60
P4 = [
    5.5107356640386095e-11, 1.1021471328077219e-10, 1.6532206992115805e-10,
    2.755367832019303e-10,  3.8575149648270303e-10, 7.715029929654061e-10,
    1.1572544894481074e-09, 1.9287574824135143e-09, 2.7002604753789237e-09,
    5.400520950757821e-09,  8.100781426136721e-09,  1.3501302376894546e-08,
    1.890182332765239e-08,  3.780364665530478e-08,  5.6705469982957235e-08,
    9.45091166382619e-08,   1.3231276329356686e-07, 2.6462552658713373e-07,
    3.9693828988070107e-07, 6.615638164678341e-07,  9.26189343054969e-07,
    1.852378686109938e-06,  2.77856802916491e-06,   4.630946715274843e-06,
    6.48332540138479e-06,   1.2966650802769545e-05, 1.9449976204154344e-05,
    3.241662700692385e-05,  4.538327780969346e-05,  9.076655561938692e-05,
    0.0001361498334290805,  0.00022691638904846718, 0.00031768294466785453,
    0.0006353658893357091,  0.0009530488340035646,  0.0015884147233392717,
    0.002223780612674981,   0.004447561225349957,   0.006671341838024934,
    0.011118903063374885,   0.015566464288724843,   0.031132928577449724,
    0.04669939286617458,    0.07783232144362429,    0.108965250021074,
    0.217930500042148,      0.32689575006322197,    0.5448262501053698,
    0.7627567501475179,     1.5255135002950357,     2.288270250442553,
    3.8137837507375876,     5.339297251032623,      10.678594502065254,
    16.017891753097885,     26.69648625516313,      37.37508075722839,
    74.75016151445678,      112.1252422716852,      186.87540378614193,
    261.62556530059874,     523.2511306011975,      784.8766959017962,
    1308.1278265029932,     1831.3789571041907,     3662.7579142083814,
    5494.136871312571,      9156.89478552096,       12819.652699729331,
    25639.305399458663,     38458.958099188036,     64098.2634986467,
    89737.56889810541,      179475.13779621082,     269212.70669431624,
    448687.8444905268,      628162.9822867368,      1256325.9645734737,
    1884488.9468602128,     3140814.9114336832,     4397140.876007163,
    8794281.752014326,      13191422.628021503,     21985704.380035803,
    30779986.132050168,     61559972.264100336,     92339958.3961506,
    153899930.66025075,     215459902.9243514,      430919805.8487017,
    646379708.7730533,      1077299514.621754,      1508219320.4704573,
    3016438640.9409146,     4524657961.411378,      7541096602.352284,
    10557535243.293213,     21115070486.586426,     31672605729.879673,
    52787676216.46591,      73902746703.05237,      147805493406.10474,
    221708240109.15796,     369513733515.2618,      517319226921.3671,
    1034638453842.7343,     1551957680764.0994,     2586596134606.8345,
    3621234588449.5737,     7242469176899.147,      10863703765348.707,
    18106172942247.86,      25348642119147.035,     50697284238294.07,
    76045926357441.02,      126743210595735.16,     177440494834029.47,
    354880989668057.1,      532321484502085.0,      887202474170142.5,
    1242083463838201.2,     2484166927676402.5,     3726250391514599.0,
    6210417319191003.0,     8694584246867417.0,     1.7389168493734834e+16,
    2.6083752740602216e+16, 4.347292123433707e+16,
]

# bagpipe4.scl: repeats at 1190 cents, not a whole-number ratio
BAGPIPE = [
    2.3943234311985675, 2.6603593679984088, 2.837716659198303,  3.19243124159809,
    3.5471458239978766, 3.724503115197771,  4.232058920873153,  3.7030515557640085,
    4.2320589208731505, 4.761066285982294,  5.290073651091439,  5.642745227830868,
    6.348088381309726,  7.053431534788587,  7.406103111528017,  8.415368110219507,
    7.363447096442065,  8.415368110219505,  9.467289123996942,  10.519210137774383,
    11.220490813626006, 12.623052165329256, 14.025613517032506, 14.726894192884133,
    16.733798312970627, 14.642073523849303, 16.73379831297063,  18.825523102091957,
    20.917247891213293, 22.31173108396084,  25.10069746945594,  27.88966385495105,
    29.284147047698607, 33.27483745353056,  29.115482771839236, 33.27483745353056,
    37.434192135221885, 41.5935468169132,   44.36644993804073,  49.91225618029583,
    55.45806242255093,  58.23096554367847,  66.16637698451645,  57.895579861451886,
    66.16637698451645,  74.43717410758099,  82.70797123064557,  88.22183597935526,
    99.24956547677465,  110.27729497419405, 115.79115972290377, 131.5705733911144,
    115.12425171722516, 131.5705733911144,  148.0168950650038,  164.46321673889307,
    175.42743118815258, 197.3558600866716,  219.28428898519078, 230.24850343445033,
    261.62556530059874, 228.92236963802384, 261.62556530059874, 294.3287609631735,
    327.0319566257485,  348.834087067465,   392.4383479508981,  436.0426088343311,
    457.8447392760477,  520.2374258519455,  455.2077476204522,  520.2374258519455,
    585.2671040834387,  650.2967823149316,  693.649901135927,   780.3561387779183,
    867.062376419909,   910.4154952409044,  1034.4821575295762, 905.1718878383793,
    1034.4821575295762, 1163.7924272207729, 1293.1026969119705, 1379.309543372768,
    1551.7232362943641, 1724.1369292159607, 1810.3437756767587, 2057.0479574677925,
    1799.9169627843191, 2057.0479574677925, 2314.178952151269,  2571.3099468347427,
    2742.7306099570565, 3085.5719362016885, 3428.4132624463195, 3599.833925568636,
    4090.4004660915975, 3579.1004078301467, 4090.4004660915975, 4601.700524353047,
    5113.000582614502,  5453.867288122131,  6135.600699137396,  6817.33411015266,
    7158.200815660293,  8133.682985980809,  7116.972612733206,  8133.682985980809,
    9150.393359228408,  10167.103732476018, 10844.910647974411, 12200.52447897121,
    13556.13830996801,  14233.945225466412, 16173.67283835827,  14151.963733563483,
    16173.67283835825,  18195.38194315303,  20217.09104794783,  21564.89711781103,
    24260.509257537404, 26956.121397263774, 28303.927467126967, 32161.038674991334,
    28140.90884061741,  32161.038674991334, 36181.16850936524,  40201.298343739145,
]


@pytest.fixture
def tet12():
    return list(TET12)


@pytest.fixture
def bagpipe():
    return list(BAGPIPE)


@pytest.fixture
def tet12_source():
    return FixedTableSource(TET12)


@pytest.fixture
def sparse_table():
    """All notes below the base-frequency floor (never used as base points)."""
    return [1.0] * 128
