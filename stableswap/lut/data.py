"""Breakpoint tables for Stable2LUT1 (a = 1).

Generated by scripts/generate_lut.py. Rows are (price, ratio_i, ratio_j):
price is the rate of token i per token j in 6-decimal fixed point, and the
ratios are reserves scaled by TABLE_PRECISION.

Swap rows lie on the curve D = 2 * TABLE_PRECISION. Liquidity rows fix
reserve i at TABLE_PRECISION.

Do not edit by hand.
"""

# Amplification coefficient the rows were generated for
A_PARAMETER = 1

TABLE_PRECISION = 10**18

SWAP_BREAKPOINTS: tuple[tuple[int, int, int], ...] = (
    (1000, 4992523958718270, 10782866539810100000),
    (1250, 5792141717050470, 10068156390297300000),
    (1563, 6721111560722910, 9404002036085720000),
    (1953, 7795243043548150, 8789630876986880000),
    (2441, 9042524645366990, 8218766551753530000),
    (3052, 10491579294541400, 7688235055324370000),
    (3815, 12170616508044900, 7196508143587380000),
    (4768, 14116673515267500, 6740530467075840000),
    (5960, 16375490563768700, 6317089991545940000),
    (7451, 18997509464180300, 5923896032060130000),
    (9313, 22036664173101300, 5559308777001360000),
    (11642, 25565612423834700, 5220632200028280000),
    (14552, 29660052471020600, 4906280845439150000),
    (18190, 34415318844005200, 4614209428611710000),
    (22737, 39939941391218600, 4342749279575270000),
    (28422, 46365737055862000, 4090161934379060000),
    (35527, 53845154842352600, 3854966233686260000),
    (44409, 62566604815598700, 3635570713594730000),
    (55511, 72756128943242400, 3430518977117380000),
    (69389, 84695137224925400, 3238324005654750000),
    (86736, 98735717392540600, 3057517579048040000),
    (108420, 115331895753262000, 2886562981189480000),
    (135525, 135081875118562000, 2723833404917620000),
    (169407, 158801069779346000, 2567517239084650000),
    (211758, 187640684926861000, 2415508807380750000),
    (264698, 223308661015964000, 2265164196245130000),
    (330872, 268472745670703000, 2112944738667290000),
    (413590, 327600127062678000, 1953635967805010000),
    (500000, 394741410360242000, 1806443932358770000),
    (520000, 411327610019348000, 1773920663003520000),
    (540000, 428377229494622000, 1741750604257220000),
    (560000, 445925263954385000, 1709844414952670000),
    (580000, 464007550512316000, 1678120683946930000),
    (600000, 482660598553412000, 1646505141526660000),
    (620000, 501921307701356000, 1614930184347160000),
    (640000, 521826545773617000, 1583334698045350000),
    (660000, 542412554206158000, 1551664172576240000),
    (680000, 563714144528493000, 1519871112190440000),
    (700000, 585763647800704000, 1487915744013060000),
    (720000, 608589581400108000, 1455767024933340000),
    (740000, 632215006812884000, 1423403933896120000),
    (760000, 656655571446602000, 1390817013308690000),
    (780000, 681917260467893000, 1358010087061050000),
    (800000, 707993934063230000, 1325002033009980000),
    (820000, 734864791596853000, 1291828427330290000),
    (840000, 762491982221109000, 1258542814855860000),
    (860000, 790818659378102000, 1225217308359900000),
    (880000, 819767833305695000, 1191942202293930000),
    (900000, 849242383449698000, 1158824327093050000),
    (920000, 879126524740410000, 1125983986808220000),
    (940000, 909288864606304000, 1093550515285200000),
    (960000, 939586954781157000, 1061656725948430000),
    (980000, 969872979577877000, 1030432761121050000),
    (1000000, 1000000000000000000, 1000000000000000000),
    (1020000, 1029828059147790000, 970465706070721000),
    (1040000, 1059229486225490000, 941918971510251000),
    (1060000, 1088092902954900000, 914428283342057000),
    (1080000, 1116325683185800000, 888040762789210000),
    (1100000, 1143854871685510000, 862782888446824000),
    (1120000, 1170626770363900000, 838662355406752000),
    (1140000, 1196605517965110000, 815670661201912000),
    (1160000, 1221771022271060000, 793786030438107000),
    (1180000, 1246116572862450000, 772976362869498000),
    (1200000, 1269646395515560000, 753201983026585000),
    (1220000, 1292373331282930000, 734418059683362000),
    (1240000, 1314316751085640000, 716576637184431000),
    (1260000, 1335500758748110000, 699628273492268000),
    (1280000, 1355952694021010000, 683523312991839000),
    (1300000, 1375701920714820000, 668212839547154000),
    (1320000, 1394778870443060000, 653649361616948000),
    (1340000, 1413214306238830000, 639787280477892000),
    (1360000, 1431038769502690000, 626583187910202000),
    (1380000, 1448282176094310000, 613996033245986000),
    (1400000, 1464973531308210000, 601987192835894000),
    (1420000, 1481140737949950000, 590520468532546000),
    (1440000, 1496810476143160000, 579562036097203000),
    (1460000, 1512008137526940000, 569080359637874000),
    (1480000, 1526757800007580000, 559046084268148000),
    (1500000, 1541082232176620000, 549431916051139000),
    (1520000, 1555002918930460000, 540212495847289000),
    (1540000, 1568540101781760000, 531364271800590000),
    (1560000, 1581712828909690000, 522865373765491000),
    (1580000, 1594539011221070000, 514695491901604000),
    (1600000, 1607035481649790000, 506835760866127000),
    (1620000, 1619218055661070000, 499268650450355000),
    (1640000, 1631101591494170000, 491977863085728000),
    (1660000, 1642700049110180000, 484948238346522000),
    (1680000, 1654026547138230000, 478165664369545000),
    (1700000, 1665093417359930000, 471616995972296000),
    (1720000, 1675912256454200000, 465289979161945000),
    (1740000, 1686493974859550000, 459173181674501000),
    (1760000, 1696848842708860000, 453255929156464000),
    (1780000, 1706986532861230000, 447528246592445000),
    (1800000, 1716916161104420000, 441980804586008000),
    (1820000, 1726646323634260000, 436604870113256000),
    (1840000, 1736185131938090000, 431392261386285000),
    (1860000, 1745540245222030000, 426335306484504000),
    (1880000, 1754718900526970000, 421426805434327000),
    (1900000, 1763727940680210000, 416659995440749000),
    (1920000, 1772573840226720000, 412028518997181000),
    (1940000, 1781262729480420000, 407526394622001000),
    (1960000, 1789800416829420000, 403147989991329000),
    (1980000, 1798192409422760000, 398887997257387000),
    (2000000, 1806443932358770000, 394741410360242000),
    (2500000, 1978219399683290000, 317600278249418000),
    (3125000, 2136034174563060000, 260959181408139000),
    (3906250, 2287694765587480000, 217443372007627000),
    (4882813, 2438090511587780000, 182937853304288000),
    (6103516, 2590593757142420000, 154956384358080000),
    (7629395, 2747742295807640000, 131895207097717000),
    (9536743, 2911593661320900000, 112662957960352000),
    (11920929, 3083923136466770000, 96483294466789400),
    (14901161, 3266340596994200000, 82783261624932100),
    (18626451, 3460364892212260000, 71126766196272400),
    (23283064, 3667473286077410000, 61173290617067200),
    (29103830, 3889136697614780000, 52651269465975800),
    (36379788, 4126846466579670000, 45340350731704700),
    (45474735, 4382135596346960000, 39059229310202400),
    (56843419, 4656596911488780000, 33657054142766700),
    (71054274, 4951898996068350000, 29007206436763200),
    (88817842, 5269800999159590000, 25002675043789500),
    (111022302, 5612166776060590000, 21552539599718300),
    (138777878, 5980978680536400000, 18579238232555000),
    (173472348, 6378351355956140000, 16016402217156800),
    (216840434, 6806545795711460000, 13807110255504900),
    (271050543, 7267983823122680000, 11902460759304000),
    (338813179, 7765263011960140000, 10260390286815000),
    (423516474, 8301172451452130000, 8844684860645200),
    (529395592, 8878709272264540000, 7624146995043570),
    (661744490, 9501096179649740000, 6571889116614480),
    (827180613, 10171800051352900000, 5664731502595310),
    (1000000000, 10782866539810100000, 4992523958718270),
)

LIQUIDITY_BREAKPOINTS: tuple[tuple[int, int, int], ...] = (
    (1000, 1000000000000000000, 2159802662735410000000),
    (1500, 1000000000000000000, 1456151077753290000000),
    (2250, 1000000000000000000, 983311515131461000000),
    (3375, 1000000000000000000, 665193170931879000000),
    (5063, 1000000000000000000, 450828864933744000000),
    (7594, 1000000000000000000, 306235766600413000000),
    (11391, 1000000000000000000, 208458285248584000000),
    (17086, 1000000000000000000, 142206669401152000000),
    (25629, 1000000000000000000, 97188526024785600000),
    (38443, 1000000000000000000, 66501779127271300000),
    (57665, 1000000000000000000, 45497435244402100000),
    (86498, 1000000000000000000, 31047513208604200000),
    (129746, 1000000000000000000, 21040152786575400000),
    (194620, 1000000000000000000, 14046098611936900000),
    (291929, 1000000000000000000, 9095568593800440000),
    (437894, 1000000000000000000, 5525383582020050000),
    (500000, 1000000000000000000, 4576271667850120000),
    (550000, 1000000000000000000, 3948346397396470000),
    (600000, 1000000000000000000, 3411310445603850000),
    (650000, 1000000000000000000, 2946272530833250000),
    (700000, 1000000000000000000, 2540129879345630000),
    (750000, 1000000000000000000, 2183869290993280000),
    (800000, 1000000000000000000, 1871487832396670000),
    (850000, 1000000000000000000, 1599181362803490000),
    (900000, 1000000000000000000, 1364538969882550000),
    (950000, 1000000000000000000, 1165613128021910000),
    (1000000, 1000000000000000000, 1000000000000000000),
    (1050000, 1000000000000000000, 864308645565231000),
    (1100000, 1000000000000000000, 754276534378425000),
    (1150000, 1000000000000000000, 665341929419650000),
    (1200000, 1000000000000000000, 593237601970851000),
    (1250000, 1000000000000000000, 534334224721824000),
    (1300000, 1000000000000000000, 485725017524107000),
    (1350000, 1000000000000000000, 445159016435898000),
    (1400000, 1000000000000000000, 410920183860472000),
    (1450000, 1000000000000000000, 381705661546984000),
    (1500000, 1000000000000000000, 356523425278302000),
    (1550000, 1000000000000000000, 334612878707722000),
    (1600000, 1000000000000000000, 315385544783247000),
    (1650000, 1000000000000000000, 298381503927378000),
    (1700000, 1000000000000000000, 283237559559908000),
    (1750000, 1000000000000000000, 269663936563711000),
    (1800000, 1000000000000000000, 257427132785389000),
    (1850000, 1000000000000000000, 246337202853159000),
    (1900000, 1000000000000000000, 236238246177615000),
    (1950000, 1000000000000000000, 227001225746234000),
    (2000000, 1000000000000000000, 218518495531055000),
    (3000000, 1000000000000000000, 128181052893698000),
    (4500000, 1000000000000000000, 81704180266895000),
    (6750000, 1000000000000000000, 54125656969777800),
    (10125000, 1000000000000000000, 36541470267554100),
    (15187500, 1000000000000000000, 24894656036455500),
    (22781250, 1000000000000000000, 17023422566186700),
    (34171875, 1000000000000000000, 11649927690862100),
    (51257813, 1000000000000000000, 7965817519500560),
    (76886719, 1000000000000000000, 5437539887253910),
    (115330078, 1000000000000000000, 3704029263370830),
    (172995117, 1000000000000000000, 2517671017945260),
    (259492676, 1000000000000000000, 1707639591417550),
    (389239014, 1000000000000000000, 1155905528838350),
    (583858521, 1000000000000000000, 780999584007361),
    (875787781, 1000000000000000000, 526818382109210),
    (1000000000, 1000000000000000000, 463005263051899),
)
