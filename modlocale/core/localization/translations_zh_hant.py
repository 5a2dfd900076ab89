"""Traditional Chinese translations for the radial menu mod."""

TRANSLATIONS_ZH_HANT = {
    # Settings screen
    "Settings_Title": "環形選單設置",
    # Config option descriptions
    "Config_FoodBindSectors": "自動綁定食物的扇區編號",
    "Config_ignoreDurabilityValue": "低於多少耐久的急救箱自動略過圓盤使用",
    "Config_showLowValueFood": "提示低價值物品是否包含食物",
    "Config_quickUseLastItemQ": "是否啟用短按Q快速使用上次物品功能",
    "Config_iconSize": "圖示尺寸",
    "Config_iconDistanceFactor": "圖示距離圓心的比例",
    "Config_uiScalePercent": "背景UI縮放百分比",
    "Config_innerDeadZoneCoefficient": "內圈死區係數",
    "Config_outerDeadZoneCoefficient": "外圈死區係數",
    "Config_longPressQWaitDuration": "呼出圓盤長按時間",
    "Config_UI8style": "8扇區UI方案",
    "Config_UI6style": "6扇區UI方案",
    "Config_sectorCount": "扇區數量",
    "Config_isBulletTimeEnabled": "是否啟用子彈時間",
    "Config_bulletTimeMultiplier": "子彈時間遊戲速度倍率",
    "Config_radialMenuActivationKey": "呼出圓盤使用的按鍵",
    "Config_enableFirstPersonAdaptation": "是否啟用第一人稱適配",
    "Config_firstPersonSensitivity": "第一人稱下呼出轉盤的靈敏度",
    "Config_enableThirdPersonAdaptation": "是否啟用第三人稱適配",
    "Config_thirdPersonSensitivityMultiplier": "第三人稱下呼出轉盤的靈敏度",
    "Config_lockRadialMenuToCenter": "是否鎖定轉盤呼出位置為螢幕中心",
    "Config_hintOptionsOnly": "下列選項僅為提示，無實際功能",
    "Config_radialMenuStuckHint": "轉盤卡在螢幕上關不掉？試試按下'win'鍵吧",
    "Config_haveFunHint": "祝你遊玩愉快",
    "Config_rightClickCloseRadialMenuHint": "呼出轉盤後點擊滑鼠右鍵可快速關閉",
    "Config_disableSpeechBubbles": "是否關閉鴨子頭頂的對話氣泡",
    "Config_playerHatedTypeIDs": "黑名單食物ID（會排到推薦列表最末尾）",
    # UI hints
    "UI_ItemCount": "數量: {0}",
    "UI_BindingNotAllowed": "此物品無法綁定",
    "UI_InstallModConfig": "請查閱創意工坊頁面並安裝所需的依賴模組",
    "UI_DefaultStyle": "預設",
    "UI_StyleOption": "{0} 方案",
    "UI_NoStyleDetected": "未檢測到 {0} 扇區的背景套裝，使用預設",
    # Log messages
    "Log_RadialMenuInit": "環形選單初始化開始...",
    "Log_RadialMenuComplete": "環形選單初始化完成",
    "Log_BindingComplete": "已將綁定持久化：扇區={0}，TypeID={1}，DisplayName={2}，autoBound={3}",
    "Log_IconDistanceUpdated": "圖示距離因子更新為 {0}，已重新計算圖示位置",
    "Log_StyleUnavailable": "樣式 {0} 對於 {1} 扇區不可用，使用預設樣式 {2}",
    "Log_LoadingStyle": "載入 {0} 扇區背景，使用樣式: {1}",
    "Log_SectorAngle": "計算了 {0} 個扇區的圖示位置，每個扇區角度: {1}°",
    # Item use feedback
    "Use_ExplosionArt": "爆炸就是藝術！",
    "Use_EatItem": "吃 {0}！",
    "Use_EquipItem": "裝備 {0}！",
    "Use_UseItem": "使用 {0}！",
    "Use_HealthRecovered": "恢復了生命值！",
    "Use_Ouch": "好痛！得趕緊治療一下",
    "Use_ReplaceAfterUse": "用完就換新的",
    "Use_HealthRemaining": "還能回{0}血量",
    "Use_DrinkItem": "喝 {0}",
    "Use_ColaOverflow": "噗！可樂溢出來了！",
    "Use_ColaDrinking": "咕嚕咕嚕咕嚕……",
    "Use_TasteItem": "偷偷嚐一口 {0}～",
    "Use_ColaByeBye": "可樂一開，煩惱拜拜。",
    "Use_Cheers": "乾杯！",
    "Use_DrinkFirst": "先乾為敬！",
    "Use_DrinkForgetWorries": "喝了這杯忘掉煩惱～",
    "Use_FoodTasty": "{0} 真好吃！",
    "Use_SoFragrant": "哇，好香！",
    "Use_HealthFull": "血量已滿",
    "Use_StrongDrink": "酒力十足！",
    "Use_DrinkTasty": "真好喝！",
    "Use_DrinkSecretly": "偷偷喝一口 {0}～",
    "Use_FoodCannotUse": "食物 {0} 無法使用",
    "Log_FoodEaten": "食用了食物：{0}",
    "Use_DuckRefusesPoop": "鴨鴨拒絕進食！那不是食物！",
    "Use_DontEatDuckPoop": "別讓鴨鴨吃糞便啊！",
    "Use_PoopDetected": "檢測到可疑物體：高風險生物廢棄物！",
    "Use_PoopGourmet": "鴨鴨不是美食家，請收起你的奇怪口味！",
    "Use_DuckCry": "鴨鴨流下了悲傷的淚水：『我做錯了什麼？』",
    "Use_DuckQuestionLife": "鴨鴨開始思考生命的意義……還有你的選擇。",
    "Use_DuckReputation": "鴨鴨的社會聲譽下降了99點！",
    "Use_DuckGag": "噁——鴨鴨快吐了！",
    "Use_DuckCivilRights": "鴨鴨要求尊重基本飲食權！",
    "Use_SurvivalMode": "求生本能啟動……但代價是靈魂受創。",
    "Use_PoopCuisine": "新菜系解鎖：法式糞便配鴨。",
    "Use_DuckBetrayed": "鴨鴨感到被深深背叛了……",
    # Food binding
    "FoodBind_AutoBindBurger": "已自動綁定老八秘製小漢堡！",
    "FoodBind_FoundPoop": "發現一坨{0}在背包裡！好臭",
    # Binding
    "Binding_Success": "已綁定：{0}",
    "Binding_Success_Short": "已綁定{0}",
    "Binding_Failed": "綁定失敗：{0}",
    # Item counts
    "Item_RemainingCount": "背包內剩餘數量 {0}",
    "Item_NoMoreItems_1": "背包裡沒有這個物品了哦！",
    "Item_NoMoreItems_2": "這個物品已經用完啦！",
    "Item_NoMoreItems_3": "你已經沒有這個物品了！",
    "Item_NoMoreItems_4": "用光光啦！",
    "Item_NoMoreItems_5": "沒有了！",
    "Item_NoMoreItems_6": "花光啦！",
    # Input handling
    "Input_SelectItemFirst": "請先選擇一個物品再開始綁定",
    "Input_NoRadialHere": "此處無法呼出圓盤選單！",
    "Input_NoLowValueItem": "未找到低價值物品",
    "Input_LowestValueItem": "價重比最低的是{0}！",
    "Input_SuggestDrop": "建議先丟掉{0}！",
    "Input_CannotCarry": "背不動了，先把{0}扔了吧～",
    "Input_NotWorthMoney": "{0}？這東西看起來不太值錢。",
    "Input_HeavyDrop": "太重了！快把{0}扔了！",
    "Input_CannotCarryAlt": "背不動了，先把{0}扔了吧～",
    "Input_LeastWorth": "{0} 最不值錢～",
    "Input_AuthorRequest": "拜託給環形選單點個讚，感謝！",
    # Menu
    "Menu_FocusLostClosed": "焦點丟失，圓盤選單已自動關閉",
    "Menu_PressToReopen": "按住 {0} 鍵重新打開圓盤選單",
    # Food auto-binding
    "Food_AutoBindSector": "已為扇區 {0} 自動綁定食物：{1}",
    "Food_PreviousFoodEaten": "之前的食物吃光了，現在吃這個 {0} ！",
    "Food_TiredOfOld": "早就吃膩了，終於換成我喜歡的 {0} 了！",
    "Food_FoundBetter": "發現更好吃的 {0}，已經替換！",
    "Food_CheapDelicious": "{0} 又便宜又美味！",
}
