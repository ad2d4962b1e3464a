"""
Fixed convolution checks, one per prime table width.

in1 and in2 are little-endian digit vectors in the width's digit base,
zero-padded to n; out is their cyclic convolution mod p.
"""

# Base 10**2, p = 40961
VECTORS_16 = {
    "n": 16,
    "in1": [38, 0, 44, 87, 6, 45, 22, 93, 0, 0, 0, 0, 0, 0, 0, 0],
    "in2": [80, 18, 62, 90, 17, 96, 27, 97, 0, 0, 0, 0, 0, 0, 0, 0],
    "out": [3040, 684, 5876, 11172, 5420, 16710, 12546, 20555,
            16730, 15704, 21665, 5490, 13887, 4645, 9021, 0],
}

# Base 2**15, p = 3221225473
VECTORS_32 = {
    "n": 16,
    "in1": [11400, 28374, 23152, 9576, 29511, 20787, 13067, 14015, 0, 0, 0, 0, 0, 0, 0, 0],
    "in2": [30268, 20788, 8033, 15446, 26275, 11619, 2494, 7016, 0, 0, 0, 0, 0, 0, 0, 0],
    "out": [345055200, 1095807432, 1382179648, 1175142886, 2016084656, 2555168834,
            2179032777, 1990011337, 1860865174, 1389799087, 942120918, 778961552,
            341270975, 126631482, 98329240, 0],
}

# Base 10**9, p = 4179340454199820289
VECTORS_64 = {
    "n": 64,
    "in1": [33243586, 638827078, 767661659, 778933286, 790244973, 910208076, 425757125,
            478004096, 153380495, 205851834, 668901196, 15731080, 899763115, 551605421,
            181279081, 600279047, 711828654, 483031418, 737709105, 20544909, 609397212,
            201989947, 215952988, 206613081, 471852626, 889775274, 992608567, 947438771,
            969970961, 676943009, 934992634, 922939225] + [0] * 32,
    "in2": [194132110, 219972873, 66644114, 902841100, 565039275, 540721923, 810650854,
            702680360, 147944788, 859947137, 59055854, 288190067, 537655879, 836782561,
            308822170, 315498953, 417177801, 640439652, 198304612, 525827778, 115633328,
            285831984, 136721026, 203065689, 884961191, 222965182, 735241234, 746745227,
            667772468, 739110962, 610860398, 965331182] + [0] * 32,
    "out": [6453647494146460, 131329535698517158, 291767894660778388, 392668443347293259,
            971459521481104784, 1474458811520325621, 1844928110064910283, 2357021332184901128,
            2928892267161886295, 2725517850003984528, 3202505799926570519, 2918543444592941968,
            2772488376791744089, 3248633108357294538, 3254615389814072180, 3638020871734883400,
            55160505208503622, 3969469665294621400, 439789777768675993, 916737048670338429,
            157193402339279849, 1030499289809835368, 534708807109284987, 462608833776141716,
            518270737313306417, 990302136704222252, 862673986833243374, 1706781055673683080,
            2148213235654123180, 4027029548560043607, 3715706394243238489, 966330325631268533,
            724857759400778139, 1014165568394318451, 978244158856038395, 3518954508900415555,
            3481727912868647859, 2905676401026905092, 1913454655595000205, 2281030150295966751,
            2048468707271352286, 1955651308030723278, 1936345891479581000, 2116568874488615349,
            1964776204460631657, 594938508019154838, 665031798826217600, 435270820221219547,
            3944115800695200119, 3877068415832542765, 3375534600145876311, 3739051895812367546,
            3787681810231019302, 3846806706428246918, 215267241912496193, 433277273552403593,
            32647322247915044, 4082693161306839314, 3321007834415954245, 2657237599459774692,
            1906778666014199420, 1466364566853824938, 890942012983413950, 0],
}

REFERENCE_VECTORS = {16: VECTORS_16, 32: VECTORS_32, 64: VECTORS_64}
